"""
Structured logging configuration for Reflect Mapper.

Mapped objects routinely carry domain data, so by default property values are
redacted before any event reaches a log sink; only names, types and decisions
are logged.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, cast

import structlog
from structlog.types import FilteringBoundLogger

REDACTED = "[REDACTED]"


class ValueRedactionProcessor:
    """
    Structlog processor that masks property values in log events.

    Note: This class has only one public method (__call__) as it's designed
    to be used as a single-purpose structlog processor following the
    structlog framework patterns.
    """

    SENSITIVE_FIELDS = {
        "value",
        "raw_value",
        "resolved_value",
        "payload",
        "input",
    }

    def __call__(
        self, logger: FilteringBoundLogger, method_name: str, event_dict: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Replace sensitive fields with a placeholder.

        Args:
            logger: Structlog logger instance
            method_name: Log method name (info, error, etc.)
            event_dict: Event dictionary to process

        Returns:
            Event dictionary with property values masked
        """
        for key in self.SENSITIVE_FIELDS.intersection(event_dict):
            event_dict[key] = REDACTED
        return event_dict


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    log_file: Optional[str] = None,
    redact_values: bool = True,
) -> None:
    """
    Set up structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format (json, console)
        log_file: Optional log file path
        redact_values: Whether to mask property values in log events
    """
    level = getattr(logging, log_level.upper())

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if redact_values:
        processors.append(ValueRedactionProcessor())

    if log_format == "json":
        processors.extend(
            [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
        )
    else:
        processors.extend([structlog.dev.ConsoleRenderer(colors=False)])

    structlog.configure(
        processors=processors,  # type: ignore[arg-type]
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, format="%(message)s", force=True)


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return cast(FilteringBoundLogger, structlog.get_logger(name))
