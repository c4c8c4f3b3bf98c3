import logging
import sys
import os

import structlog

LOGGER_NAME = "goessner_json"

# Library calls stay silent until the application configures logging.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(
    level: str = "INFO", format_type: str = "json", structured: bool = True
) -> None:
    """Configure structured logging with structlog.

    Logs go to stderr: stdout is reserved for converted JSON.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_type: "json" for machine-readable logs, "human" for dev
        structured: Whether to add callsite parameters to each event
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stderr,
        format="%(message)s",  # structlog will handle formatting
        force=True,
    )

    is_dev = format_type == "human" or os.getenv(
        "GOESSNER_JSON_LOG_HUMAN", ""
    ).lower() in ("1", "true", "yes")

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if structured:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            )
        )

    if is_dev:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger `name`.

    The stdlib logger is bound up front rather than taken from structlog's
    logger factory. Before `configure_logging` runs, events then pass through
    stdlib levels and handlers (the NullHandler above) instead of structlog's
    default stdout printer.

    Examples:
        log = get_logger(__name__)
        log.info("Converted document", root="feed", elements=42)
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
