"""Global pytest configuration for zookit."""

from pathlib import Path

import pytest

from zookit.adapters.reporters import RecordingReporter

pytest_plugins = ["pytester"]

TESTS_ROOT = Path(__file__).parent.resolve()
DEFAULT_MARKERS = {"unit": TESTS_ROOT / "unit", "e2e": TESTS_ROOT / "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark items with the name of the top-level test directory they live in."""
    for item in items:
        path = item.path.resolve()
        for marker_name, root in DEFAULT_MARKERS.items():
            if root in path.parents and not any(
                m.name == marker_name for m in item.iter_markers()
            ):
                item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def recorder() -> RecordingReporter:
    """Return a fresh reporter that records every call it receives."""
    return RecordingReporter()
