from restclient.config import ClientSettings, create_ssl_context, get_client_settings
from restclient.http import AsyncRestClient
from restclient.logging import setup_logging


def create_async_rest_client(
    base_url: str | None = None,
    settings: ClientSettings | None = None,
) -> AsyncRestClient:
    """Factory function to create a REST client from settings"""
    settings = settings or get_client_settings()
    return AsyncRestClient(
        base_url=base_url if base_url is not None else settings.base_url,
        ssl_context=create_ssl_context(settings),
        http_proxy_config=settings.proxy_config(),
        timeouts=settings.timeouts(),
        max_in_memory_size=settings.max_in_memory_size,
    )


def setup_logging_from_settings(settings: ClientSettings | None = None) -> None:
    """Configure logging with the level, format and body logging from settings"""
    settings = settings or get_client_settings()
    setup_logging(
        settings.service_name,
        level=settings.log_level,
        format_type=settings.log_format,
        log_http_bodies=settings.log_http_bodies,
    )
