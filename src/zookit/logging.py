"""Logging setup for the zookit CLI.

Two sinks are attached to the root logger:

- the console, through Rich on stderr, at the verbosity chosen with -v/-q;
- the flight recorder, a bounded in-memory buffer kept at DEBUG and written
  to a file when a WARNING arrives or when a create request is rejected.

Records from other libraries carry a ``[name]`` prefix on the console.
"""

from __future__ import annotations

import logging
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "zookit"
FLIGHT_RECORDER_CAPACITY = 2000  # pragma: no mutate
RECORDER_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Pass as `extra=` to write the recorder buffer out for a sub-WARNING record.
FLUSH_RECORDER = {"flush_recorder": True}


@dataclass(frozen=True)
class LogSettings:
    """Logging choices made on the command line."""

    verbose_count: int = 0
    quiet_count: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flush_on_close: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def level(self) -> int:
        """Console level: WARNING moved one step per -v/-q, kept in DEBUG..CRITICAL."""
        level = logging.WARNING + 10 * (self.quiet_count - self.verbose_count)
        return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Set `record.prefix` to "[lib]" for non-zookit loggers, "" otherwise."""

    def filter(self, record: logging.LogRecord) -> bool:
        ours = record.name.split(".")[0] == PROJECT_PREFIX
        record.prefix = "" if ours else f"[{record.name.split('.')[0]}]"
        return True


class FlightRecorder(MemoryHandler):
    """Memory buffer that also flushes on records logged with FLUSH_RECORDER."""

    def shouldFlush(self, record: logging.LogRecord) -> bool:
        return super().shouldFlush(record) or getattr(
            record, "flush_recorder", False
        )


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a stderr RichHandler.

    Debug mode forces DEBUG and shows timestamps, logger names and source
    paths; otherwise records are shown bare, with the third-party prefix.
    """
    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = FLIGHT_RECORDER_CAPACITY,
    flush_on_close: bool = False,
) -> FlightRecorder:
    """Return a FlightRecorder writing to `path` (truncated on creation).

    Up to `capacity` records are buffered; the buffer is written on WARNING,
    on a FLUSH_RECORDER record, and on close when `flush_on_close` is set.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return FlightRecorder(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LogSettings) -> list[logging.Handler]:
    """Install the console and flight-recorder handlers on the root logger.

    The root logger passes everything through; each handler applies its own
    level. Per-logger overrides from `settings.logger_levels` apply to both.

    Returns:
        The handlers attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(settings.level, settings.debug, settings.color)
    ]
    if settings.log_path is not None:
        handlers.append(
            config_flight_recorder(
                settings.log_path, flush_on_close=settings.flush_on_close
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: Logger,
    settings: LogSettings,
    handlers: list[logging.Handler],
    *,
    app_version: str,
    max_ttl_ms: int,
) -> None:
    """Log a one-line INFO summary, then DEBUG diagnostics."""
    logger.info(
        "ZOOKIT %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.level),
        "OFF" if settings.log_path is None else "ON",
    )
    logger.debug("Python: %s (%s)", sys.version.split()[0], platform.platform())
    logger.debug("Max TTL: %s ms", max_ttl_ms)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.log_path is not None:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            FLIGHT_RECORDER_CAPACITY,
            settings.flush_on_close,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {n: logging.getLevelName(lvl) for n, lvl in settings.logger_levels.items()}
        or "<none>",
    )
