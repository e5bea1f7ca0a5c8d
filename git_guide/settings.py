"""Logging for git-guide.

All module loggers hang below the ``git_guide`` package logger, which owns the
single handler and the level. Records are written to stderr through
``click.echo`` so colors are dropped when stderr is not a terminal.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Final

import click

from git_guide.config import LOG_LEVEL_ENV_VAR


PACKAGE_LOGGER_NAME: Final[str] = "git_guide"

_FORMAT: Final[str] = "[%(levelname)s::%(name)s] %(message)s"

_LEVEL_STYLES: Final[dict[int, dict[str, Any]]] = {
    logging.DEBUG: {"fg": "bright_black", "dim": True},
    logging.INFO: {"fg": "cyan"},
    logging.WARNING: {"fg": "yellow", "bold": True},
    logging.ERROR: {"fg": "red", "bold": True},
    logging.CRITICAL: {"fg": "white", "bg": "red", "bold": True},
}


class _ClickEchoHandler(logging.Handler):
    """Handler that styles each record by level and echoes it to stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            click.echo(click.style(message, **_LEVEL_STYLES.get(record.levelno, {})), err=True)
        except Exception:
            self.handleError(record)


def _level_from_env() -> int | None:
    level_name = os.getenv(LOG_LEVEL_ENV_VAR)
    if not level_name:
        return None

    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else None


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    if not any(isinstance(handler, _ClickEchoHandler) for handler in logger.handlers):
        handler = _ClickEchoHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)

    return logger


def git_guide_logger(name: str) -> logging.Logger:
    """Return the logger for module *name*, configuring the package logger once."""

    package_logger = _package_logger()

    env_level = _level_from_env()
    if env_level is not None:
        package_logger.setLevel(env_level)

    return logging.getLogger(name)


def set_git_guide_log_level(level_name: str) -> None:
    """Set the level of every git-guide logger, e.g. ``"DEBUG"``."""

    level = logging.getLevelName(level_name.upper())
    _package_logger().setLevel(level if isinstance(level, int) else logging.NOTSET)
