"""Logging helpers used by the LOGANALYZER CLI.

Console logging goes through Rich on stderr. An in-memory "flight recorder"
buffers records at DEBUG granularity and writes them to disk on flush. A
filter tags third-party records with a short prefix for console display.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "loganalyzer"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get `record.prefix` set to a
    bracketed token like "[urllib3]"; project records get an empty prefix.
    Always returns True.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, show timestamps, logger names and source paths.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler writing to stderr.
    """
    # keep in step with click-extra's --color / --no-color
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def config_flight_recorder(
    path: Path, capacity: int = 2000, flush_on_close: bool = False
) -> MemoryHandler:
    """Buffer up to `capacity` records in memory and dump them to `path`.

    The buffer is written when a WARNING or worse arrives, when it is full,
    or on close if `flush_on_close`. The file is only created on first write.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def _describe_recorder(handler: logging.Handler) -> str | None:
    if not isinstance(handler, MemoryHandler):
        return None
    target = handler.target
    path = getattr(target, "baseFilename", None) or "<none>"
    return (
        f"path={path}, capacity={handler.capacity}, "
        f"flush_on_close={handler.flushOnClose}"
    )


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary, then DEBUG diagnostics.

    Whether the flight recorder is on, and how it is set up, is read from
    the `MemoryHandler` among `handlers`.
    """
    recorders = [d for d in map(_describe_recorder, handlers) if d is not None]
    logger.info(
        "LOGANALYZER %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if recorders else "OFF",
    )

    diagnostics = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
        "Click": version("click"),
        "Rich": version("rich"),
        "Handlers": [type(h).__name__ for h in handlers],
    }
    for key, value in diagnostics.items():
        logger.debug("%s: %s", key, value)
    for description in recorders:
        logger.debug("Flight recorder: %s", description)
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
