"""zookit CLI entry point.

The top-level ``zookit`` group only sets up logging from its options and
reads the TTL limit; the work happens in its subcommands.

Groups
- ``zookit modes``: list, parse and check node creation modes.

Examples
    $ zookit --version
    $ zookit modes parse 3
    $ zookit modes check /locks/lock- --flag 3
    $ zookit -v modes check /cache/entry --mode persistent-with-ttl --ttl 60000
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from zookit import __version__
from zookit.config import InvalidConfigError, get_max_ttl_ms
from zookit.logging import LogSettings, configure_logging, log_startup

from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level
from .modes import modes as modes_group

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("zookit", appauthor=False, ensure_exists=True)) / "latest.log"
)


HELP = """zookit command-line interface.

    Inspect the creation modes of a ZooKeeper-style coordination service and
    validate create requests (path, mode, TTL) before they reach a server.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  ZooKeeper: " + hyperlink("https://zookeeper.apache.org/doc/current/"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[clickx.ColorOption(show_envvar=True), clickx.ExtraVersionOption()],
    epilog=EPILOG,
)
@click.option(
    "-v", "--verbose", "verbose_count", count=True, help="More console output."
)
@click.option(
    "-q", "--quiet", "quiet_count", count=True, help="Less console output."
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Show timestamps, logger names and source paths on the console.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="ZOOKIT_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar="ZOOKIT_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Buffer DEBUG records in memory and write them to --log-path on a "
        "WARNING or a rejected create request."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar="ZOOKIT_FORCE_FLUSH_FLIGHT_RECORDER",
    show_envvar=True,
    help="Also write the flight-recorder buffer on exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("click_extra=WARNING",),
    envvar="ZOOKIT_LOGGER_LEVEL",
    show_default=True,
    show_envvar=True,
    help="NAME=LEVEL for one logger (repeatable; comma/space list in the env var).",
)
@clickx.pass_context
def zookit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """zookit command-line interface."""
    try:
        max_ttl_ms = get_max_ttl_ms()
    except InvalidConfigError as e:
        raise click.ClickException(str(e)) from e

    settings = LogSettings(
        verbose_count=verbose_count,
        quiet_count=quiet_count,
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        flush_on_close=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(
        logger, settings, handlers, app_version=__version__, max_ttl_ms=max_ttl_ms
    )
    ctx.call_on_close(logging.shutdown)


zookit.add_command(modes_group)
