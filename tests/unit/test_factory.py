import ssl
from unittest.mock import patch

from restclient import create_async_rest_client, setup_logging_from_settings
from restclient.config import ClientSettings
from restclient.http import ClientTimeouts


class TestCreateAsyncRestClient:
    """Test cases for the client factory"""

    def test_uses_settings(self):
        settings = ClientSettings(
            base_url="http://dmaap.internal:3904",
            http_proxy_host="proxy.internal",
            http_proxy_port=3128,
            read_timeout=12.0,
            max_in_memory_size=2048,
        )

        client = create_async_rest_client(settings=settings)

        assert client.base_url == "http://dmaap.internal:3904"
        assert client.http_proxy_config.url == "http://proxy.internal:3128"
        assert client.timeouts == ClientTimeouts(connect=10.0, read=12.0, write=30.0)
        assert client.max_in_memory_size == 2048
        assert client.ssl_context is None
        assert client.is_built is False

    def test_explicit_base_url_wins(self):
        settings = ClientSettings(base_url="http://from-settings")

        client = create_async_rest_client("http://explicit", settings=settings)

        assert client.base_url == "http://explicit"
        assert client.http_proxy_config is None

    def test_tls_enabled(self):
        client = create_async_rest_client(settings=ClientSettings(ssl_enabled=True))

        assert isinstance(client.ssl_context, ssl.SSLContext)


class TestSetupLoggingFromSettings:
    """Test cases for logging configuration from settings"""

    def test_passes_logging_settings(self):
        settings = ClientSettings(
            service_name="orders-client",
            log_level="DEBUG",
            log_format="console",
            log_http_bodies=True,
        )

        with patch("restclient.factory.setup_logging") as mock_setup:
            setup_logging_from_settings(settings)

        mock_setup.assert_called_once_with(
            "orders-client", level="DEBUG", format_type="console", log_http_bodies=True
        )
