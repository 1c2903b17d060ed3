"""Log output for the client's stdlib loggers, rendered by structlog.

Only the ``testament_client`` logger is touched; the embedding application's
root handlers and its own structlog configuration are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "testament_client"

_HANDLER_NAME = "testament_client.structlog"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route ``testament_client`` records through a structlog renderer.

    Calling it again replaces the handler installed by the previous call.

    Args:
        verbose: Log each request and response at DEBUG. When False, only WARNING+
            (transport failures).
        log_json: Render JSON lines instead of console output.
        stream: Output stream; stderr by default.

    Returns:
        The installed handler.
    """
    stream = stream or sys.stderr

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return handler
