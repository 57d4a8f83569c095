"""Configuration management utilities."""

from .settings import ClientSettings, create_ssl_context, get_client_settings

__all__ = [
    "ClientSettings",
    "get_client_settings",
    "create_ssl_context",
]
