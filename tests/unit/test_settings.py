# Assumptions:
# - Settings are read from REST_CLIENT_* environment variables
# - monkeypatch isolates the environment per test

import os
import ssl

import pytest

from restclient.config import ClientSettings, create_ssl_context, get_client_settings
from restclient.http import ClientTimeouts


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test without a .env file or leftover REST_CLIENT_* variables"""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("REST_CLIENT_"):
            monkeypatch.delenv(key)
    get_client_settings.cache_clear()
    yield
    get_client_settings.cache_clear()


class TestClientSettings:
    """Test cases for client settings"""

    def test_defaults(self):
        settings = ClientSettings()

        assert settings.base_url == "http://localhost:8080"
        assert settings.max_in_memory_size is None
        assert settings.proxy_config() is None
        assert settings.timeouts() == ClientTimeouts(connect=10.0, read=30.0, write=30.0)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("REST_CLIENT_BASE_URL", "https://dmaap.internal:3905")
        monkeypatch.setenv("REST_CLIENT_HTTP_PROXY_HOST", "proxy.internal")
        monkeypatch.setenv("REST_CLIENT_HTTP_PROXY_PORT", "3128")
        monkeypatch.setenv("REST_CLIENT_READ_TIMEOUT", "5")
        monkeypatch.setenv("REST_CLIENT_MAX_IN_MEMORY_SIZE", "1048576")

        settings = ClientSettings()

        assert settings.base_url == "https://dmaap.internal:3905"
        proxy = settings.proxy_config()
        assert proxy is not None
        assert proxy.url == "http://proxy.internal:3128"
        assert settings.timeouts().read == 5.0
        assert settings.max_in_memory_size == 1048576

    def test_proxy_needs_host_and_port(self, monkeypatch):
        monkeypatch.setenv("REST_CLIENT_HTTP_PROXY_HOST", "proxy.internal")

        assert ClientSettings().proxy_config() is None

    def test_reads_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("REST_CLIENT_BASE_URL=http://from-env-file:9000\n")

        assert ClientSettings().base_url == "http://from-env-file:9000"

    def test_rejects_non_positive_timeouts(self, monkeypatch):
        monkeypatch.setenv("REST_CLIENT_CONNECT_TIMEOUT", "0")

        with pytest.raises(ValueError):
            ClientSettings()

    def test_settings_singleton(self):
        assert get_client_settings() is get_client_settings()


class TestCreateSslContext:
    """Test cases for TLS context construction"""

    def test_disabled_returns_none(self):
        assert create_ssl_context(ClientSettings(ssl_enabled=False)) is None

    def test_enabled_returns_verifying_context(self):
        context = create_ssl_context(ClientSettings(ssl_enabled=True))

        assert isinstance(context, ssl.SSLContext)
        assert context.verify_mode == ssl.CERT_REQUIRED
        assert context.check_hostname is True

    def test_verification_can_be_disabled(self):
        context = create_ssl_context(ClientSettings(ssl_enabled=True, ssl_verify=False))

        assert context.verify_mode == ssl.CERT_NONE
        assert context.check_hostname is False

    def test_missing_ca_file_raises(self, tmp_path):
        settings = ClientSettings(ssl_enabled=True, ssl_ca_file=str(tmp_path / "missing.pem"))

        with pytest.raises(FileNotFoundError):
            create_ssl_context(settings)
