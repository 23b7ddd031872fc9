"""Opt-in structlog rendering for the ``anydate`` logger.

Every module logs through ``logging.getLogger(__name__)``, so records land
under the ``anydate`` hierarchy and nothing is configured on import.
:func:`configure_logging` attaches one handler with a structlog
``ProcessorFormatter`` to that logger alone. The root logger, its
handlers, and the global structlog configuration belong to the host
application and are left untouched.

Two output modes:
- Human (default): console-formatted output to stderr
- JSON (log_json=True): Structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from anydate.config.settings import AnydateSettings

LOGGER_NAME = "anydate"
HANDLER_NAME = "anydate.structlog"


def _build_formatter(log_json: bool, stream: TextIO) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Render ``anydate`` records through structlog.

    Repeated calls replace the handler installed by the previous call;
    handlers added by anyone else stay. Records stop propagating to the
    root logger so they are not written twice.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        stream: Destination, stderr by default.

    Returns:
        The installed handler.
    """
    stream = stream or sys.stderr
    logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(existing)

    handler = logging.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(_build_formatter(log_json, stream))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return handler


def configure_from_settings(settings: AnydateSettings) -> logging.Handler:
    """Apply the ``verbose`` and ``log_json`` flags of *settings*."""
    return configure_logging(verbose=settings.verbose, log_json=settings.log_json)
