"""
Centralized logging configuration for the STREACS data layer.

This module provides standardized logging configuration using structlog
for all components. Source loading, indexing and query modules obtain
their loggers here so that output is formatted consistently.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

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


def get_loader_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for source loading.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger tagged with the data loader subsystem
    """
    return get_logger(name).bind(subsystem="data_loader")


def log_source_load(
    logger: FilteringBoundLogger,
    source: str,
    origin: str,
    entries: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of loading one named source.

    Args:
        logger: Structlog logger instance
        source: Name of the source (e.g. "market_structure")
        origin: Where the data came from: "loaded", "fallback" or "empty"
        entries: Number of top-level entries now held for the source
        context: Additional context data (error text, location)
    """
    bound_logger = logger.bind(
        source=source,
        origin=origin,
        entries=entries,
    )

    if context:
        bound_logger = bound_logger.bind(**context)

    if origin == "loaded":
        bound_logger.info("Source loaded")
    else:
        bound_logger.warning("Source unavailable, degraded")
