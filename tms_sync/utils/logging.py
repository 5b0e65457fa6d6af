# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Logging setup for the sync core and the course API.

Modules log through the standard library (``logging.getLogger(__name__)``).
setup_logging installs a single root handler whose structlog
ProcessorFormatter renders those records together with the session
context bound through bind_context: JSON lines in production, colored
console output in development.

Example:
    >>> from tms_sync.utils.logging import bind_context, setup_logging
    >>> from tms_sync.core.config import get_settings
    >>> setup_logging(get_settings())
    >>> bind_context(role="Admin")
    >>> logging.getLogger("tms_sync.domains.sync").info("Cache cleared")
"""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from tms_sync.core.config.settings import Settings

QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "asyncio")

_handler: logging.Handler | None = None


def setup_logging(settings: "Settings", stream: TextIO | None = None) -> logging.Handler:
    """Route standard library log records through structlog rendering.

    Calling this again replaces the handler installed by the previous call.

    Args:
        settings: Application settings; log_level sets the ``tms_sync`` level,
            environment and debug pick the renderer.
        stream: Output stream; stdout when omitted.

    Returns:
        The installed root handler.
    """
    global _handler

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    pre_chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.is_development or settings.debug:
        renderers: list[Processor] = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
        )
    )

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    _handler = handler

    logging.getLogger("tms_sync").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler


def bind_context(**kwargs: object) -> None:
    """Attach key-value pairs to every later log record in this context.

    The session binds the active role on login and role switches.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop all bound values; called on logout."""
    structlog.contextvars.clear_contextvars()
