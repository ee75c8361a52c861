"""Unit tests for client configuration."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from translink_rtti.core.config import TRANSLINK_DOMAIN, ClientConfig


class TestClientConfig:
    """Test ClientConfig model."""

    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url == TRANSLINK_DOMAIN
        assert config.connect_timeout == 10
        assert config.read_timeout is None
        assert config.ssl_verify is True
        assert config.timeout == (10, None)

    def test_timeout_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            ClientConfig(connect_timeout=0)

    def test_from_env_defaults(self):
        assert ClientConfig.from_env() == ClientConfig()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TRANSLINK_API_BASE_URL", "https://rtti.example.com/v1/")
        monkeypatch.setenv("TRANSLINK_CONNECT_TIMEOUT", "2.5")
        monkeypatch.setenv("TRANSLINK_SSL_VERIFY", "false")

        config = ClientConfig.from_env()

        assert config.base_url == "https://rtti.example.com/v1"
        assert config.connect_timeout == 2.5
        assert config.ssl_verify is False

