"""Structured logging utilities."""

from .setup import add_service_context, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "add_service_context",
]
