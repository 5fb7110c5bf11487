"""Structured logging configuration using structlog.

Usage:
    from acronym_service.logging_config import configure_logging, get_logger

    # In main.py startup
    configure_logging()

    # In application code
    logger = get_logger(__name__)
    logger.info("acronyms.store.loaded", categories=2, acronyms=40)
"""

import logging
import sys
from typing import Any

import structlog


def add_service_context(service: str, version: str) -> Any:
    """Build a processor that stamps every event with the service name and version."""

    def processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service)
        event_dict.setdefault("version", version)
        return event_dict

    return processor


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    service: str | None = None,
    version: str = "",
) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: If True, render one JSON object per line. If False, use
                   human-readable console output.
        service: Service name added to every event (omitted when None)
        version: Service version added alongside the name

    Processor Pipeline:
    0. Merge context variables (e.g. the parse request being served)
    1. Add log level
    2. Add logger name
    3. Add timestamp (ISO8601 UTC)
    4. Add callsite info (file, function, line)
    5. Format as console or JSON
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
    ]

    if service:
        processors.append(add_service_context(service, version))

    if json_logs:
        # Exceptions must be formatted before JSON rendering
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
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


def get_logger(name: str) -> Any:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Configured structlog logger (BoundLogger)

    Note: Returns Any to avoid complex structlog type annotations.
    The actual type is structlog.stdlib.BoundLogger.
    """
    return structlog.get_logger(name)
