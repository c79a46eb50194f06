"""Base structured logging utilities for the provider layer.

Rationale:
- One place configures the shared ``latchlm`` logger (JSON or plain text on
  stderr) instead of ad-hoc setup in every provider module.
- Provider modules obtain child loggers (``latchlm.gemini`` ...) that
  propagate to the shared handler, so there is exactly one emission per event.
- Events are emitted with :func:`log_event` as single-line JSON payloads.

Environment:
    ``LATCHLM_LOG_LEVEL`` overrides the level (DEBUG, INFO, WARNING, ERROR,
    CRITICAL; case-insensitive).

Secrets are never passed to these helpers; callers log provider, model and
status only.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "latchlm"

_BASE_LOGGER_ATTR = "_latchlm_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_latchlm_console_handler"
_FILE_HANDLER_ATTR = "_latchlm_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Parse a level name into its numeric constant, falling back to ``default``."""
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and return the shared ``latchlm`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv("LATCHLM_LOG_LEVEL"), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(desired_level)
        for handler in logger.handlers:
            if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
                handler.setLevel(desired_level)
                # capture fixtures may swap sys.stderr between calls
                if hasattr(handler, "setStream"):
                    handler.setStream(sys.stderr)
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a child of the shared logger, configuring it if needed."""
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        New level (number or name). ``None`` keeps the current level.
    file_path: Optional[str]
        When given, attach (or retarget) a rotating file handler writing to
        this path. When ``None``, remove any file handler added earlier by this
        function. Handlers attached by users are left alone.
    json_mode: bool
        Formatter for the file handler.
    """
    logger = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)
    if level is not None:
        numeric = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(numeric)
        for handler in logger.handlers:
            handler.setLevel(numeric)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for handler in managed:
        if target is not None and getattr(handler, "baseFilename", None) == target:
            handler.setFormatter(_formatter(json_mode))
            handler.setLevel(logger.level)
            return logger
        logger.removeHandler(handler)
        with contextlib.suppress(OSError):
            handler.close()
    if target is None:
        return logger

    os.makedirs(os.path.dirname(target), exist_ok=True)
    file_handler = RotatingFileHandler(target, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(file_handler, _FILE_HANDLER_ATTR, True)
    file_handler.setLevel(logger.level)
    file_handler.setFormatter(_formatter(json_mode))
    logger.addHandler(file_handler)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit one structured event.

    The payload is ``{"event": event, **ctx, **fields}`` with ``None`` values
    dropped, serialized as a single JSON line.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
