"""
Asynchronous REST client library.

This library provides:
- A reusable async HTTP client with TLS and HTTP proxy support
- Protocol and transport error mapping
- Structured logging setup
- Configuration management
"""

from .factory import create_async_rest_client, setup_logging_from_settings
from .http import (
    AsyncRestClient,
    HttpProxyConfig,
    ProtocolError,
    ResponseEnvelope,
    RestClientError,
    TransportError,
)

__version__ = "1.0.0"

__all__ = [
    "AsyncRestClient",
    "HttpProxyConfig",
    "ProtocolError",
    "ResponseEnvelope",
    "RestClientError",
    "TransportError",
    "create_async_rest_client",
    "setup_logging_from_settings",
]
