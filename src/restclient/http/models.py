from dataclasses import dataclass, field

import httpx

APPLICATION_JSON = "application/json"


@dataclass(frozen=True)
class HttpProxyConfig:
    """HTTP forward proxy settings"""

    host: str = ""
    port: int = 0

    @property
    def is_configured(self) -> bool:
        return bool(self.host) and self.port > 0

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"


@dataclass(frozen=True)
class ClientTimeouts:
    """Timeouts in seconds applied to every connection"""

    connect: float = 10.0
    read: float = 30.0
    write: float = 30.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(connect=self.connect, read=self.read, write=self.write, pool=None)


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    path: str
    trace_id: int
    body: str | None = None
    content_type: str | None = None
    auth: tuple[str, str] | None = field(default=None, repr=False)

    def headers(self) -> dict[str, str]:
        if self.content_type:
            return {"Content-Type": self.content_type}
        return {}

    def content(self) -> bytes | None:
        """Request payload; POST and PUT always send one, empty when no body was given"""
        if self.method in ("GET", "DELETE"):
            return None
        return (self.body or "").encode("utf-8")


@dataclass(frozen=True)
class ResponseEnvelope:
    """Status, headers and decoded body of a completed request"""

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: str | None = None

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")


def to_body(envelope: ResponseEnvelope) -> str:
    """Return the envelope body, or an empty string when the response had none"""
    if envelope.body is None:
        return ""
    return envelope.body
