"""The engine's two loggers: one for the core, one for the client application."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_LOGGER_NAME = "VEX"
CLIENT_LOGGER_NAME = "APP"

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"


class _StdoutHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stdout`` is at the time of each record."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)

    def emit(self, record: logging.LogRecord) -> None:
        self.setStream(sys.stdout)
        super().emit(record)


def _configure(logger: logging.Logger) -> None:
    logger.setLevel(TRACE)
    logger.propagate = False
    if not any(isinstance(h, _StdoutHandler) for h in logger.handlers):
        handler = _StdoutHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
        logger.addHandler(handler)


def init() -> None:
    """Set up the core and client loggers; calling it again changes nothing."""
    _configure(core_logger())
    _configure(client_logger())


def core_logger() -> logging.Logger:
    """Return the logger used by the engine itself."""
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """Return the logger meant for applications built on the engine."""
    return logging.getLogger(CLIENT_LOGGER_NAME)