"""
Tests for the provider lifecycle: metadata, schema, configure and the
capability lists, including the configure state machine and masking.
"""

import io
import logging

import pytest

from leaseweb_provider import LeasewebProvider, ProviderState, new
from leaseweb_provider.client import LeasewebClient, new_client
from leaseweb_provider.config import UNKNOWN, MappingEnvironmentReader, ProviderConfigModel, known
from leaseweb_provider.config.env import EnvironmentReader
from leaseweb_provider.errors import ClientConstructionError
from leaseweb_provider.log import MASK, StructuredFormatter, get_log_context

TOKEN = "s3cr3t"


@pytest.fixture
def provider():
    return LeasewebProvider(
        version="test", env=MappingEnvironmentReader({"LEASEWEB_TOKEN": TOKEN})
    )


class TestStaticCalls:
    def test_metadata(self, provider):
        metadata = provider.metadata()
        assert metadata.type_name == "leaseweb"
        assert metadata.version == "test"

    def test_schema(self, provider):
        attributes = provider.schema().attributes
        assert set(attributes) == {"host", "scheme", "token"}
        assert all(a.optional for a in attributes.values())
        assert attributes["token"].sensitive
        assert not attributes["host"].sensitive
        assert "LEASEWEB_HOST" in attributes["host"].description
        assert "api.leaseweb.com" in attributes["host"].description

    def test_static_calls_do_not_change_state(self, provider):
        provider.metadata()
        provider.schema()
        assert provider.state == ProviderState.UNINITIALIZED

    def test_new_returns_zero_argument_constructor(self):
        factory = new("1.0.0")
        first, second = factory(), factory()
        assert first is not second
        assert first.metadata().version == "1.0.0"


class TestConfigure:
    def test_success_shares_one_handle(self, provider):
        response = provider.configure(ProviderConfigModel())

        assert not response.diagnostics.has_error()
        assert isinstance(response.data_source_data, LeasewebClient)
        assert response.data_source_data is response.resource_data
        assert provider.client is response.data_source_data
        assert provider.state == ProviderState.CONFIGURED
        assert response.data_source_data.base_url == "https://api.leaseweb.com"
        assert response.data_source_data.version == "test"

    def test_config_overrides_reach_client(self, provider):
        response = provider.configure({"host": "custom.example.com", "scheme": "http"})
        assert response.data_source_data.base_url == "http://custom.example.com"

    def test_unknown_token(self, provider):
        response = provider.configure({"token": UNKNOWN})

        assert response.data_source_data is None
        assert response.resource_data is None
        assert [d.path for d in response.diagnostics] == ["token"]
        assert provider.state == ProviderState.CONFIGURATION_FAILED
        assert provider.client is None

    def test_missing_token_produces_no_client(self):
        calls = []

        def factory(token, options, version):
            calls.append(token)
            return new_client(token, options, version)

        provider = LeasewebProvider(
            version="test", env=MappingEnvironmentReader(), client_factory=factory
        )
        response = provider.configure(ProviderConfigModel())

        assert len(response.diagnostics) == 1
        assert response.diagnostics.errors()[0].summary == "Missing Leaseweb API token"
        assert response.data_source_data is None
        assert calls == []

    def test_invalid_provider_block(self, provider):
        response = provider.configure({"host": 8080})
        assert response.diagnostics.has_error()
        assert response.diagnostics.errors()[0].path == "host"
        assert provider.state == ProviderState.CONFIGURATION_FAILED

    def test_non_string_attribute_name(self, provider):
        response = provider.configure({1: "x"})
        assert response.diagnostics.errors()[0].summary == "Invalid provider attribute"
        assert provider.state == ProviderState.CONFIGURATION_FAILED

    def test_unexpected_error_ends_in_failed_state(self):
        class BrokenEnvironment(EnvironmentReader):
            def get(self, name):
                raise OSError("environment unavailable")

        provider = LeasewebProvider(version="test", env=BrokenEnvironment())
        response = provider.configure(ProviderConfigModel())

        diag = response.diagnostics.errors()[0]
        assert diag.summary == "Unable to configure Leaseweb provider"
        assert "environment unavailable" in diag.detail
        assert response.data_source_data is None
        assert provider.state == ProviderState.CONFIGURATION_FAILED
        assert provider.client is None

    def test_invalid_override_reported_as_diagnostic(self, provider):
        response = provider.configure({"scheme": "gopher"})
        diag = response.diagnostics.errors()[0]
        assert diag.summary == "Unable to create Leaseweb API client"
        assert response.data_source_data is None

    def test_failing_factory_never_raises_or_leaks_token(self):
        def factory(token, options, version):
            raise RuntimeError(f"rejected token {token}")

        provider = LeasewebProvider(
            version="test",
            env=MappingEnvironmentReader({"LEASEWEB_TOKEN": TOKEN}),
            client_factory=factory,
        )
        response = provider.configure(ProviderConfigModel())

        diag = response.diagnostics.errors()[0]
        assert diag.summary == ClientConstructionError("x").summary
        assert TOKEN not in diag.detail
        assert MASK in diag.detail
        assert provider.state == ProviderState.CONFIGURATION_FAILED

    def test_configure_only_once(self, provider):
        first = provider.configure(ProviderConfigModel())
        second = provider.configure(ProviderConfigModel(token=known("other")))

        assert not first.diagnostics.has_error()
        assert second.diagnostics.has_error()
        assert second.data_source_data is None
        assert provider.client is first.data_source_data
        assert provider.state == ProviderState.CONFIGURED

    def test_trace_context_is_accepted(self, provider):
        carrier = {"traceparent": "00-0af7651916cd43dd8448eb211c80319c-b7ad6b7169203331-01"}
        response = provider.configure(ProviderConfigModel(), trace_context=carrier)
        assert not response.diagnostics.has_error()


class TestConfigureLogging:
    def test_fields_and_masking_installed(self, provider):
        provider.configure({"host": "custom.example.com"})

        fields = get_log_context().fields
        assert fields["leaseweb_host"] == "custom.example.com"
        assert fields["leaseweb_scheme"] == ""
        assert fields["leaseweb_token"] == TOKEN
        assert TOKEN in get_log_context().secrets

    def test_no_record_contains_token_after_configure(self, provider):
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredFormatter("%(levelname)s:%(name)s:%(message)s"))
        logger = logging.getLogger("leaseweb_provider")
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            provider.configure(ProviderConfigModel())
            logging.getLogger("leaseweb_provider.tests").info("using token %s", TOKEN)
        finally:
            logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

        output = stream.getvalue()
        assert "Configured Leaseweb client" in output
        assert f"leaseweb_token={MASK}" in output
        assert TOKEN not in output

    def test_failed_configure_does_not_touch_log_context(self):
        provider = LeasewebProvider(version="test", env=MappingEnvironmentReader())
        provider.configure(ProviderConfigModel())
        assert get_log_context().fields == {}
        assert get_log_context().secrets == ()


class TestCapabilities:
    def test_listed_before_configure(self, provider):
        assert len(provider.data_sources()) == 15
        assert len(provider.resources()) == 16

    def test_same_lists_after_configure(self, provider):
        before = (provider.data_sources(), provider.resources())
        provider.configure(ProviderConfigModel())
        assert (provider.data_sources(), provider.resources()) == before

    def test_constructed_capabilities_share_client(self, provider):
        response = provider.configure(ProviderConfigModel())
        instances = [ctor() for ctor in provider.resources()]
        for instance in instances:
            assert not instance.configure(response.resource_data).has_error()
        assert all(instance.client is provider.client for instance in instances)
