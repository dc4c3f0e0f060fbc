"""
Centralized logging configuration for the trade analytics engine.

All components log through structlog so the host application can route
engine output into its own pipeline as either console text or JSON lines.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    stream: Optional[TextIO] = None
) -> None:
    """
    Route engine logs through the standard library root logger.

    Host applications that already configure logging can skip this; the
    engine only ever calls ``get_logger``.

    Args:
        level: Logging level name
        format_json: Render JSON lines instead of console text
        include_timestamp: Add an ISO-8601 UTC ``timestamp`` key
        stream: Output stream, stdout by default
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream or sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    # Decimal amounts arrive as strings already; anything else falls back to str
    processors.append(
        structlog.processors.JSONRenderer(default=str) if format_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_metrics_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the metrics subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying subsystem context
    """
    return get_logger(name).bind(subsystem="metrics")


def log_alignment_decision(
    logger: FilteringBoundLogger,
    analysis_timeframe: str,
    entry_timeframe: str,
    aligned: bool,
    recommended: Optional[str],
    trade_id: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a timeframe alignment decision with standardized format.

    Args:
        logger: Structlog logger instance
        analysis_timeframe: Canonical analysis (HTF) label
        entry_timeframe: Canonical entry (LTF) label
        aligned: Whether the pair is top-down aligned
        recommended: Recommended maximum entry timeframe
        trade_id: Optional trade identifier
        context: Additional context data
    """
    bound_logger = logger.bind(
        analysis_timeframe=analysis_timeframe,
        entry_timeframe=entry_timeframe,
        alignment_result="ALIGNED" if aligned else "NOT_ALIGNED",
        recommended_max_entry_timeframe=recommended,
        trade_id=trade_id,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if aligned:
        bound_logger.info("Timeframes aligned")
    else:
        bound_logger.warning("Timeframes not aligned")
