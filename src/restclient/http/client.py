import ssl
import threading
from collections.abc import Awaitable, Coroutine
from typing import Any

import httpx
import structlog

from .errors import ProtocolError, ResponseTooLargeError, TransportError
from .models import (
    APPLICATION_JSON,
    ClientTimeouts,
    HttpProxyConfig,
    RequestDescriptor,
    ResponseEnvelope,
    to_body,
)
from .tracing import next_trace_id

TRACE_LOGGER_NAME = "restclient.http.trace"

logger = structlog.get_logger(__name__)
# Request and response bodies; only emitted when body logging is switched on
trace_logger = structlog.get_logger(TRACE_LOGGER_NAME)


class AsyncRestClient:
    """
    Generic asynchronous REST client bound to one base URL.

    Every operation returns an awaitable immediately; the trace id of the
    request is allocated at call time so log lines follow issuance order.
    Error statuses (4xx/5xx) raise ProtocolError, everything that prevents a
    complete exchange raises TransportError.
    """

    def __init__(
        self,
        base_url: str,
        ssl_context: ssl.SSLContext | None = None,
        http_proxy_config: HttpProxyConfig | None = None,
        timeouts: ClientTimeouts | None = None,
        max_in_memory_size: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.ssl_context = ssl_context
        self.http_proxy_config = http_proxy_config
        self.timeouts = timeouts or ClientTimeouts()
        # None or a negative value means no limit on buffered response bodies
        if max_in_memory_size is not None and max_in_memory_size < 0:
            max_in_memory_size = None
        self.max_in_memory_size = max_in_memory_size
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = threading.Lock()

    async def __aenter__(self) -> "AsyncRestClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def post_for_entity(
        self, uri: str, body: str | None = None, content_type: str | None = None
    ) -> Coroutine[Any, Any, ResponseEnvelope]:
        request = self._compose("POST", uri, body=body, content_type=content_type)
        return self.dispatch(request)

    def post(
        self, uri: str, body: str | None = None, content_type: str | None = None
    ) -> Coroutine[Any, Any, str]:
        return _as_body(self.post_for_entity(uri, body, content_type))

    def post_with_auth_header(
        self,
        uri: str,
        body: str | None,
        username: str,
        password: str,
        content_type: str | None = None,
    ) -> Coroutine[Any, Any, str]:
        request = self._compose(
            "POST", uri, body=body, content_type=content_type, auth=(username, password)
        )
        return _as_body(self.dispatch(request))

    def put_for_entity(self, uri: str, body: str) -> Coroutine[Any, Any, ResponseEnvelope]:
        if body is None:
            raise ValueError("PUT requires a body")
        request = self._compose("PUT", uri, body=body, content_type=APPLICATION_JSON)
        return self.dispatch(request)

    def put(self, uri: str, body: str) -> Coroutine[Any, Any, str]:
        return _as_body(self.put_for_entity(uri, body))

    def get_for_entity(self, uri: str) -> Coroutine[Any, Any, ResponseEnvelope]:
        return self.dispatch(self._compose("GET", uri))

    def get(self, uri: str) -> Coroutine[Any, Any, str]:
        return _as_body(self.get_for_entity(uri))

    def delete_for_entity(self, uri: str) -> Coroutine[Any, Any, ResponseEnvelope]:
        return self.dispatch(self._compose("DELETE", uri))

    def delete(self, uri: str) -> Coroutine[Any, Any, str]:
        return _as_body(self.delete_for_entity(uri))

    def _compose(
        self,
        method: str,
        uri: str,
        body: str | None = None,
        content_type: str | None = None,
        auth: tuple[str, str] | None = None,
    ) -> RequestDescriptor:
        trace_id = next_trace_id()
        logger.debug(
            "HTTP request",
            trace_id=trace_id,
            method=method,
            url=f"{self.base_url}{uri}",
            basic_auth=auth is not None,
        )
        if method in ("POST", "PUT"):
            trace_logger.debug("HTTP request body", trace_id=trace_id, method=method, body=body)
        return RequestDescriptor(
            method=method,
            path=uri,
            trace_id=trace_id,
            body=body,
            content_type=content_type,
            auth=auth,
        )

    async def dispatch(self, request: RequestDescriptor) -> ResponseEnvelope:
        """Send a composed request, logging the outcome without altering it"""
        try:
            envelope = await self._exchange(request)
        except ProtocolError as e:
            logger.debug(
                "HTTP error status",
                trace_id=request.trace_id,
                status_code=e.status_code,
                body=e.body,
            )
            raise
        except TransportError as e:
            logger.debug("HTTP error", trace_id=request.trace_id, error=e.message)
            raise

        trace_logger.debug(
            "HTTP response received",
            trace_id=request.trace_id,
            status_code=envelope.status_code,
            body=envelope.body,
            content_type=envelope.content_type,
        )
        return envelope

    async def _exchange(self, request: RequestDescriptor) -> ResponseEnvelope:
        client = self.get_client()
        auth = httpx.BasicAuth(*request.auth) if request.auth else httpx.USE_CLIENT_DEFAULT
        try:
            http_request = client.build_request(
                request.method,
                request.path,
                content=request.content(),
                headers=request.headers(),
            )
            response = await client.send(http_request, auth=auth, stream=True)
            try:
                content = await self._read_content(response)
            finally:
                await response.aclose()
        except (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError) as e:
            raise TransportError(str(e) or type(e).__name__) from e

        body = content.decode(response.encoding or "utf-8", errors="replace") if content else None
        if response.is_error:
            raise ProtocolError(response.status_code, body or "", response.headers)
        return ResponseEnvelope(status_code=response.status_code, headers=response.headers, body=body)

    async def _read_content(self, response: httpx.Response) -> bytes:
        if self.max_in_memory_size is None:
            return await response.aread()

        chunks = []
        size = 0
        async for chunk in response.aiter_bytes():
            size += len(chunk)
            if size > self.max_in_memory_size:
                raise ResponseTooLargeError(self.max_in_memory_size)
            chunks.append(chunk)
        return b"".join(chunks)

    @property
    def is_built(self) -> bool:
        return self._client is not None

    def get_client(self) -> httpx.AsyncClient:
        """Return the underlying client, building it on first use"""
        client = self._client
        if client is None:
            with self._lock:
                if self._client is None:
                    self._client = self._build_client()
                client = self._client
        return client

    def _is_http_proxy_configured(self) -> bool:
        return self.http_proxy_config is not None and self.http_proxy_config.is_configured

    def _build_client(self) -> httpx.AsyncClient:
        client_kwargs: dict[str, Any] = {
            "base_url": self.base_url,
            "timeout": self.timeouts.to_httpx(),
            # Proxy and TLS come from explicit configuration only, not the environment
            "trust_env": False,
        }

        if self.ssl_context is not None:
            client_kwargs["verify"] = self.ssl_context

        if self._is_http_proxy_configured():
            client_kwargs["proxy"] = self.http_proxy_config.url

        if self._transport is not None:
            client_kwargs["transport"] = self._transport

        logger.debug(
            "Building HTTP client",
            base_url=self.base_url,
            tls=self.ssl_context is not None,
            proxy=client_kwargs.get("proxy"),
            max_in_memory_size=self.max_in_memory_size,
        )
        return httpx.AsyncClient(**client_kwargs)

    async def aclose(self) -> None:
        """Close the underlying client and its connections, if it was ever built"""
        if self._client is not None:
            await self._client.aclose()


async def _as_body(entity: Awaitable[ResponseEnvelope]) -> str:
    return to_body(await entity)
