"""Interface for test failure reporters.

The assertion helpers in `zookit.testing.assertions` never raise; they
report failures through a `Reporter`. Any test harness object that exposes
`helper()` and `errorf()` can be adapted to this interface, and tests of the
helpers themselves use a recording fake.
"""

import abc
from typing import Any


class Reporter(abc.ABC):
    """Contract for the capability that records assertion failures."""

    @abc.abstractmethod
    def helper(self) -> None:
        """Mark the calling function as a test helper."""

    @abc.abstractmethod
    def errorf(self, format: str, *args: Any) -> None:  # pylint: disable=redefined-builtin
        """Record a formatted failure message without halting the test.

        Args:
            format: Message, or printf-style template when `args` are given.
            *args: Values substituted into `format`.
        """
