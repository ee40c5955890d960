"""Logging configuration for the email service."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Optional

from core.settings import settings

if TYPE_CHECKING:  # pragma: no cover
    from flask import Flask


_CONSOLE_HANDLER_ATTR = "_is_emailservice_console_handler"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _create_console_handler() -> logging.Handler:
    """Create the stdout handler shared by the app and module loggers."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def ensure_console_logging(logger: logging.Logger, level: int) -> None:
    """Attach the console handler to *logger* if missing and apply *level*."""

    for handler in logger.handlers:
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            handler.setLevel(level)
            break
    else:
        handler = _create_console_handler()
        handler.setLevel(level)
        logger.addHandler(handler)

    logger.setLevel(level)


def configure_app_logging(app: "Flask", level: Optional[str] = None) -> None:
    """Configure logging for *app*.

    Module loggers (``domain``, ``application``, ``infrastructure``) propagate
    to the root logger, so the console handler is installed there; the Flask
    app logger propagates to it as well.
    """

    level_name = (level or app.config.get("LOG_LEVEL") or settings.log_level).upper()
    if app.debug:
        level_name = "DEBUG"
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    ensure_console_logging(logging.getLogger(), numeric_level)
    app.logger.setLevel(numeric_level)


def log_event_error(logger: logging.Logger, message: str, event: str, exc_info: bool = True, **extra_attrs):
    """Log an error with an event identifier.

    Args:
        logger: Logger instance to use.
        message: Error message.
        event: Event identifier for categorization.
        exc_info: Whether to include exception information.
        **extra_attrs: Additional attributes to include in log record.
    """
    extra = {
        'event': event,
        **extra_attrs
    }

    logger.error(message, exc_info=exc_info, extra=extra)


def log_event_info(logger: logging.Logger, message: str, event: str, **extra_attrs):
    """Log info with an event identifier.

    Args:
        logger: Logger instance to use.
        message: Info message.
        event: Event identifier for categorization.
        **extra_attrs: Additional attributes to include in log record.
    """
    extra = {
        'event': event,
        **extra_attrs
    }

    logger.info(message, extra=extra)
