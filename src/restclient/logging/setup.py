import logging
import sys

import structlog
from pythonjsonlogger.json import JsonFormatter
from structlog.stdlib import LoggerFactory

from restclient.http.client import TRACE_LOGGER_NAME


def setup_logging(
    service_name: str,
    level: str = "INFO",
    format_type: str = "json",  # "json" or "console"
    log_http_bodies: bool = False,
) -> None:
    """
    Set up structured logging for the client

    Args:
        service_name: Name of the service for log context
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_type: "json" for production, "console" for development
        log_http_bodies: Emit request and response bodies on the trace logger
    """

    # Configure stdlib logging
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    # basicConfig leaves the level alone when handlers already exist
    logging.getLogger().setLevel(log_level)
    logging.getLogger(TRACE_LOGGER_NAME).setLevel(logging.DEBUG if log_http_bodies else logging.INFO)

    # Configure processors
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_service_context(service_name),
    ]

    if format_type == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        # Event dict is handed to the JSON formatter as record attributes
        processors.append(structlog.stdlib.render_to_log_kwargs)

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    if format_type == "json":
        root_logger = logging.getLogger()
        handler = logging.StreamHandler(sys.stdout)
        formatter = JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
        handler.setFormatter(formatter)
        root_logger.handlers = [handler]


def add_service_context(service_name: str):
    """Add service context to all log entries"""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
