"""Level-filtered logging for the request pipeline."""

from __future__ import annotations

import logging
from typing import Any, Literal

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

LIBRARY_LOGGER_NAME = "rest_manager"

_THRESHOLDS: dict[LogLevel, int] = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class BoundLogger:
    """Forwards pipeline events to a ``logging.Logger`` or a duck-typed logger.

    The pipeline emits trace (per-request outcome), debug (dispatch, body
    degradation, request creation failures) and error (failing completion
    callbacks). Events under ``level`` are dropped before formatting.
    """

    def __init__(self, logger: Any | None = None, *, level: LogLevel = "info") -> None:
        self._logger = logger or _library_logger()
        self._level = level
        self._threshold = _THRESHOLDS[level]

    def trace(self, msg: str, *args: Any) -> None:
        self._emit(TRACE_LEVEL, "trace", msg, args)

    def debug(self, msg: str, *args: Any) -> None:
        self._emit(logging.DEBUG, "debug", msg, args)

    def error(self, msg: str, *args: Any) -> None:
        self._emit(logging.ERROR, "error", msg, args)

    def child(self, name: str) -> "BoundLogger":
        """Scope events under ``<logger>.<name>`` when wrapping a stdlib logger."""
        if isinstance(self._logger, logging.Logger):
            return BoundLogger(self._logger.getChild(name), level=self._level)
        return BoundLogger(self._logger, level=self._level)

    def _emit(self, level: int, method: str, msg: str, args: tuple[Any, ...]) -> None:
        if level < self._threshold:
            return
        try:
            if isinstance(self._logger, logging.Logger):
                self._logger.log(level, msg, *args)
                return
            handler = getattr(self._logger, method, None)
            if handler is not None:
                handler(msg, *args)
        except Exception:
            # Logging failures must not leak into request handling
            pass


def _library_logger() -> logging.Logger:
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def create_logger(*, logger: Any | None = None, level: LogLevel = "info") -> BoundLogger:
    if isinstance(logger, BoundLogger):
        return logger
    return BoundLogger(logger, level=level)


__all__ = ["BoundLogger", "LogLevel", "TRACE_LEVEL", "create_logger"]
