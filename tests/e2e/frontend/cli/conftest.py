"""Fixtures for end-to-end tests of the `zookit` CLI.

Provides a test-only `log-demo` command that logs at every level from a
zookit logger and a third-party logger, plus a CliRunner and an isolated
filesystem per test.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from zookit.entrypoints.cli.main import zookit

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on 'zookit.demo' and some on 'some.thirdparty'."""
    logger = logging.getLogger("zookit.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove `name` from the group and from any Click-Extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' on the top-level group for one test."""
    zookit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(zookit, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield
