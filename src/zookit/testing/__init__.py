"""Assertion helpers for zookit tests.

Example:
    ```py
    from zookit.testing import equal, no_error

    def test_parse(reporter):
        mode = CreateMode.parse(3)
        equal(reporter, CreateMode.EPHEMERAL_SEQUENTIAL, mode)
    ```
"""

from .assertions import equal, fail, no_error
from .formatting import deep_equal, render

__all__ = ["deep_equal", "equal", "fail", "no_error", "render"]
