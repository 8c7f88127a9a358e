"""Logging setup driven by ``ObservabilityConfig``.

Modules keep logging through the standard library
(``logging.getLogger(__name__)`` with ``extra={...}``). The handler
installed here formats those records with structlog, so the ``extra``
fields come out as key/value pairs, or as JSON when ``structured`` is set.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from .config import ObservabilityConfig, get_config


def build_formatter(structured: bool) -> structlog.stdlib.ProcessorFormatter:
    """Formatter that renders stdlib records through structlog processors."""
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if structured:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(
            ensure_ascii=False
        )
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Handler:
    """Install a single stderr handler on the ``metro_router`` logger.

    Calling it again replaces the previously installed handler, so the
    entry point and tests can both call it safely.

    Args:
        config: Logging settings; defaults to the application config.

    Returns:
        The handler that was installed.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(config.structured))

    logger = logging.getLogger("metro_router")
    for existing in list(logger.handlers):
        if getattr(existing, "_metro_router_handler", False):
            logger.removeHandler(existing)
    handler._metro_router_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    return handler
