import httpx


class RestClientError(Exception):
    """Base exception for REST client failures"""

    pass


class ProtocolError(RestClientError):
    """Raised when the remote endpoint answers with an error status"""

    def __init__(self, status_code: int, body: str, headers: httpx.Headers | None = None):
        self.status_code = status_code
        self.body = body
        self.headers = headers if headers is not None else httpx.Headers()
        super().__init__(f"HTTP error status {status_code}: {body}")


class TransportError(RestClientError):
    """Raised when no complete HTTP exchange took place (network, TLS, timeout, proxy)"""

    status_code = None

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ResponseTooLargeError(TransportError):
    """Raised when a response body exceeds the configured in-memory limit"""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Response body exceeds in-memory limit of {limit} bytes")
