"""Asynchronous REST client with TLS, proxy and per-request trace logging."""

from .client import TRACE_LOGGER_NAME, AsyncRestClient
from .errors import ProtocolError, ResponseTooLargeError, RestClientError, TransportError
from .models import (
    APPLICATION_JSON,
    ClientTimeouts,
    HttpProxyConfig,
    RequestDescriptor,
    ResponseEnvelope,
    to_body,
)

__all__ = [
    "AsyncRestClient",
    "TRACE_LOGGER_NAME",
    "RestClientError",
    "ProtocolError",
    "TransportError",
    "ResponseTooLargeError",
    "APPLICATION_JSON",
    "ClientTimeouts",
    "HttpProxyConfig",
    "RequestDescriptor",
    "ResponseEnvelope",
    "to_body",
]
