"""Tests for the Leaseweb client handle."""

import pytest
from pydantic import ValidationError

from leaseweb_provider.client import (
    DEFAULT_HOST,
    DEFAULT_SCHEME,
    ClientOptions,
    LeasewebClient,
    client_from_config,
    new_client,
)
from leaseweb_provider.config import ResolvedConfig
from leaseweb_provider.errors import ClientConstructionError


class TestNewClient:
    def test_defaults_apply_without_overrides(self):
        client = new_client("abc123", ClientOptions(), "test")
        assert client.host == DEFAULT_HOST
        assert client.scheme == DEFAULT_SCHEME
        assert client.base_url == "https://api.leaseweb.com"
        assert client.user_agent == "terraform-provider-leaseweb/test"

    def test_overrides(self):
        client = new_client("abc123", ClientOptions(host="localhost:8080", scheme="http"), "dev")
        assert client.base_url == "http://localhost:8080"

    def test_invalid_scheme(self):
        with pytest.raises(ClientConstructionError, match="Unable to create"):
            new_client("abc123", ClientOptions(scheme="ftp"), "test")

    def test_invalid_host_reason(self):
        with pytest.raises(ClientConstructionError) as exc_info:
            new_client("abc123", ClientOptions(host="api.leaseweb.com/v2"), "test")
        assert "invalid host" in exc_info.value.reason

    def test_token_is_not_rendered(self):
        client = new_client("abc123", ClientOptions(), "test")
        assert "abc123" not in repr(client)
        assert "abc123" not in str(client.model_dump())
        assert client.token.get_secret_value() == "abc123"

    def test_handle_is_frozen(self):
        client = new_client("abc123", ClientOptions(), "test")
        with pytest.raises(ValidationError):
            client.host = "other.example.com"


def test_client_from_config_passes_overrides():
    calls = []

    def factory(token, options, version):
        calls.append((token, options, version))
        return new_client(token, options, version)

    resolved = ResolvedConfig(token="abc123", host_override="custom.example.com")
    client = client_from_config(resolved, "1.2.3", factory)

    assert isinstance(client, LeasewebClient)
    assert calls == [("abc123", ClientOptions(host="custom.example.com", scheme=None), "1.2.3")]
    assert client.host == "custom.example.com"
    assert client.scheme == DEFAULT_SCHEME
