"""Logging setup shared by the library, the CLI and the server."""

from __future__ import annotations

import logging
import sys

from catalogtree.config import CATALOGTREE_LOG_LEVEL

_ROOT_LOGGER_NAME = "catalogtree"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _ExtraFormatter(logging.Formatter):
    """Append structured ``extra`` fields to the formatted message."""

    _RESERVED = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self._RESERVED and not key.startswith("_")
        }
        if not extras:
            return base
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} [{rendered}]"


def configure_logging(level: str | int | None = None) -> None:
    """Install a single stream handler on the package and server loggers.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.
    """
    resolved = level if level is not None else CATALOGTREE_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_ExtraFormatter(_FORMAT))

    for name in (_ROOT_LOGGER_NAME, "server"):
        logger = logging.getLogger(name)
        for existing in list(logger.handlers):
            if getattr(existing, "_catalogtree_handler", False):
                logger.removeHandler(existing)
        handler._catalogtree_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logger.setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
