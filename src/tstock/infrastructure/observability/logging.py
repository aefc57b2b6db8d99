"""
Structured logging infrastructure for tstock.
Provides consistent, machine-readable logs across the fetch pipeline.

Log Structure:
    {
        "app": "tstock",              # Application identifier
        "layer": "ingestion",         # Architectural layer
        "component": "hexun-fetcher", # Specific component
        "module": "...",              # Python module (optional)
        "security": "SZ:000001",      # Domain context
        "event": "quote_fetched",     # What happened
        ...
    }

Architectural Layers:
    - ingestion: Data acquisition (transport, fetcher, orchestrator)
    - cli: Command-line entrypoint and rendering

Logs are written to stderr by default: stdout carries the quote table.
"""

import logging
import sys
from typing import Any, Literal, TextIO

import structlog
from structlog.types import EventDict

Layer = Literal["ingestion", "cli"]

APP_NAME = "tstock"


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the application identifier to every log entry."""
    event_dict["app"] = APP_NAME
    return event_dict


def add_severity_level(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """
    Add severity level for cloud logging compatibility.
    Maps Python log levels to standard severity names.
    """
    level = event_dict.get("level")
    if level:
        severity_map = {
            "debug": "DEBUG",
            "info": "INFO",
            "warning": "WARNING",
            "error": "ERROR",
            "critical": "CRITICAL",
        }
        event_dict["severity"] = severity_map.get(level, "INFO")
    return event_dict


def setup_logging(
    level: str = "WARNING",
    json_logs: bool = False,
    include_timestamp: bool = True,
    stream: TextIO | None = None,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
        json_logs: If True, output JSON. If False, use human-readable format.
        include_timestamp: Whether to include ISO timestamps in logs
        stream: Destination stream, stderr when omitted

    Usage:
        >>> from tstock.infrastructure.observability import setup_logging
        >>> setup_logging(level="DEBUG", json_logs=True)
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=log_level,
        force=True,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_log_level,
        add_severity_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_logs:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None,
    layer: Layer | None = None,
    component: str | None = None,
    **initial_context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with architectural context bound.

    Args:
        name: Logger name (typically __name__ of the calling module)
        layer: Architectural layer (infrastructure, ingestion, processing, cli)
        component: Specific component within the layer
        **initial_context: Additional context key-value pairs to bind

    Usage:
        >>> log = get_logger(__name__, layer="ingestion", component="hexun-fetcher")
        >>> log.info("quote_fetched", security="SZ:000001")
    """
    logger = structlog.get_logger(name)

    context = {}

    if layer:
        context["layer"] = layer

    if component:
        context["component"] = component

    if name:
        context["module"] = name

    context.update(initial_context)

    if context:
        logger = logger.bind(**context)

    return logger


# ============================================================================
# Layer-Specific Logger Factories
# ============================================================================


def get_ingestion_logger(
    component: str,
    provider: str | None = None,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for ingestion layer (data acquisition).

    Args:
        component: Component name (e.g., "hexun-fetcher", "fetch-orchestrator")
        provider: Quote provider name (e.g., "hexun") - optional
        **context: Additional context

    Usage:
        >>> log = get_ingestion_logger("hexun-fetcher", provider="hexun")
        >>> log.warning("quote_unavailable", reason="http_status_500")
    """
    ctx = {}
    if provider:
        ctx["provider"] = provider
    ctx.update(context)

    return get_logger(
        "ingestion",
        layer="ingestion",
        component=component,
        **ctx,
    )


def get_cli_logger(
    component: str = "tstock-cli",
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the command-line layer.

    Usage:
        >>> log = get_cli_logger()
        >>> log.info("watchlist_loaded", securities=3)
    """
    return get_logger(
        "cli",
        layer="cli",
        component=component,
        **context,
    )
