# Configuration for the REST client, read from REST_CLIENT_* environment
# variables or a local .env file.

import ssl
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from restclient.http.models import ClientTimeouts, HttpProxyConfig


class ClientSettings(BaseSettings):
    """REST client settings"""

    model_config = SettingsConfigDict(
        env_prefix="REST_CLIENT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Service
    service_name: str = "async-rest-client"
    base_url: str = "http://localhost:8080"

    # Proxy
    http_proxy_host: str = ""
    http_proxy_port: int = 0

    # TLS
    ssl_enabled: bool = False
    ssl_verify: bool = True
    ssl_ca_file: str | None = None
    ssl_cert_file: str | None = None
    ssl_key_file: str | None = None
    ssl_key_password: str | None = None

    # Timeouts (seconds)
    connect_timeout: float = Field(default=10.0, gt=0)
    read_timeout: float = Field(default=30.0, gt=0)
    write_timeout: float = Field(default=30.0, gt=0)

    # Unlimited by default: large bodies are never truncated, at the cost of memory
    max_in_memory_size: int | None = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    log_http_bodies: bool = False

    def proxy_config(self) -> HttpProxyConfig | None:
        proxy = HttpProxyConfig(host=self.http_proxy_host, port=self.http_proxy_port)
        return proxy if proxy.is_configured else None

    def timeouts(self) -> ClientTimeouts:
        return ClientTimeouts(
            connect=self.connect_timeout,
            read=self.read_timeout,
            write=self.write_timeout,
        )


@lru_cache()
def get_client_settings() -> ClientSettings:
    """Get client settings singleton"""
    return ClientSettings()


def create_ssl_context(settings: ClientSettings) -> ssl.SSLContext | None:
    """
    Build the TLS context for the client.

    Returns None when TLS is disabled. A client certificate enables mutual
    TLS; ssl_verify=False turns off hostname and certificate checks.
    """
    if not settings.ssl_enabled:
        return None

    context = ssl.create_default_context(cafile=settings.ssl_ca_file)
    if settings.ssl_cert_file:
        context.load_cert_chain(
            settings.ssl_cert_file,
            keyfile=settings.ssl_key_file,
            password=settings.ssl_key_password,
        )
    if not settings.ssl_verify:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context
