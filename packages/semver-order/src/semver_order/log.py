# SPDX-License-Identifier: MIT
"""Logger configuration for the semver_order namespace.

The library never configures logging on import; it only attaches a
``NullHandler`` so that records are dropped unless an application (or the
``semver-order`` command) calls :func:`setup_logging`.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from typing import IO, Optional

ROOT_LOGGER = "semver_order"

LOG_DEFAULT_FORMAT = "%(levelname)s: %(message)s"
LOG_VERBOSE_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str, *, datefmt: Optional[str] = None, use_color: bool = True) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if self.use_color and self._should_use_color():
            color = self.COLORS.get(record.levelname)
            if color:
                record = logging.makeLogRecord(record.__dict__)
                record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)

    @staticmethod
    def _should_use_color() -> bool:
        if os.environ.get("NO_COLOR"):
            return False
        try:
            return sys.stderr.isatty()
        except (AttributeError, OSError):
            return False


def setup_logging(*, verbose: bool = False, stream: Optional[IO[str]] = None) -> None:
    """Attach a stream handler to the ``semver_order`` logger.

    Safe to call repeatedly; previous handlers are replaced.

    Args:
        verbose: Log at DEBUG with timestamps instead of INFO.
        stream: Output stream, ``sys.stderr`` by default.
    """
    level = logging.DEBUG if verbose else logging.INFO

    with _lock:
        root = logging.getLogger(ROOT_LOGGER)
        root.handlers.clear()
        root.setLevel(level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(
            ColoredFormatter(
                LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
                datefmt=LOG_DATE_FORMAT,
                use_color=not os.environ.get("NO_COLOR"),
            )
        )
        root.addHandler(handler)
        root.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``semver_order`` hierarchy.

    Args:
        name: Usually ``__name__``. Names outside the namespace are nested
            under it.
    """
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())
