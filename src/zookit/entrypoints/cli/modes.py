"""Command group for inspecting node creation modes.

Commands
- ``zookit modes list``: table (or JSON) of every mode and its traits.
- ``zookit modes parse``: resolve a wire flag to its mode.
- ``zookit modes check``: validate a create request (path, flag or mode
  name, TTL). Rejections are flushed to the flight recorder.
"""

import json
import logging

import click

from zookit.domain.create_mode import CreateMode
from zookit.domain.create_rules import (
    check_create,
    check_create_container,
    check_create_ttl,
)
from zookit.domain.errors import ZookitError
from zookit.domain.paths import validate_path
from zookit.logging import FLUSH_RECORDER

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

TRAITS = ("ephemeral", "sequential", "container", "ttl")


def _traits(mode: CreateMode) -> dict[str, bool]:
    return {trait: getattr(mode, f"is_{trait}") for trait in TRAITS}


@click.group()
def modes() -> None:
    """Inspect node creation modes and their wire flags."""


@modes.command("list")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of a table.")
def list_modes(as_json: bool) -> None:
    """List every creation mode with its flag and traits."""
    rows = [{"flag": m.to_flag(), "name": str(m), **_traits(m)} for m in CreateMode]
    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    width = max(len(str(m)) for m in CreateMode)
    click.echo(f"FLAG  {'NAME':<{width}}  TRAITS")
    for row in rows:
        traits = ",".join(t for t in TRAITS if row[t]) or "-"
        click.echo(f"{row['flag']:>4}  {row['name']:<{width}}  {traits}")


@modes.command("parse", context_settings={"ignore_unknown_options": True})
@click.argument("flag", type=int)
def parse_mode(flag: int) -> None:
    """Print the creation mode encoded by FLAG.

    Negative values are taken as the flag rather than as options.
    """
    try:
        mode = CreateMode.parse(flag)
    except ZookitError as e:
        error(str(e))
        raise SystemExit(1) from e
    click.echo(str(mode))


def _resolve_mode(flag: int | None, name: str | None) -> CreateMode:
    if flag is not None and name is not None:
        raise click.UsageError("--flag and --mode are mutually exclusive.")
    if name is not None:
        return CreateMode.from_name(name)
    return CreateMode.parse(0 if flag is None else flag)


@modes.command("check")
@click.argument("path")
@click.option(
    "--flag",
    "flag",
    type=int,
    default=None,
    help="Wire flag of the creation mode [default: 0].",
)
@click.option(
    "--mode",
    "mode_name",
    metavar="NAME",
    default=None,
    help="Creation mode by name (e.g. ephemeral-sequential) instead of --flag.",
)
@click.option(
    "--ttl",
    "ttl",
    type=int,
    default=None,
    help="Time-to-live in milliseconds (required for TTL modes).",
)
def check_request(
    path: str, flag: int | None, mode_name: str | None, ttl: int | None
) -> None:
    """Validate a create request for PATH without contacting a server."""
    try:
        mode = _resolve_mode(flag, mode_name)
        validate_path(path, is_sequential=mode.is_sequential)
        if mode.is_ttl:
            check_create_ttl(mode, 0 if ttl is None else ttl)
        elif mode.is_container:
            check_create_container(mode)
        else:
            check_create(mode)
    except ZookitError as e:
        logger.info(
            "Rejected create request for %r: %s", path, e, extra=FLUSH_RECORDER
        )
        error(str(e))
        raise SystemExit(1) from e

    if ttl is not None and not mode.is_ttl:
        logger.debug("Unused ttl=%d for mode %s", ttl, mode)
        warn(f"Ignoring --ttl for non-TTL mode {mode}.")
    success(f"Create request for {path} as {mode} is valid.")
