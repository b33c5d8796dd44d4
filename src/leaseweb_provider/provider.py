"""The Leaseweb provider: lifecycle calls made by the host runtime.

The host drives the provider through a fixed sequence:

1. ``metadata()`` and ``schema()`` - static, no side effects
2. ``configure()`` - at most once per process; resolves the provider block
   against the environment and builds the shared client handle
3. ``data_sources()`` / ``resources()`` - the registered constructors; these
   may be listed whether or not configuration succeeded

``configure`` never raises. Every problem is returned as a diagnostic, and
any error diagnostic means no client handle is produced.

Example:
    ```python
    provider = LeasewebProvider(version="1.0.0")
    response = provider.configure({"host": "api.leaseweb.com"})
    if not response.diagnostics.has_error():
        for ctor in provider.resources():
            resource = ctor()
            resource.configure(response.resource_data)
    ```
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from leaseweb_provider import log
from leaseweb_provider.capabilities.base import Capability
from leaseweb_provider.client import ClientFactory, LeasewebClient, client_from_config, new_client
from leaseweb_provider.config.env import EnvironmentReader, OsEnvironmentReader
from leaseweb_provider.config.loader import config_from_dict
from leaseweb_provider.config.models import ProviderConfigModel
from leaseweb_provider.config.resolver import ConfigResolver
from leaseweb_provider.diagnostics import Diagnostics
from leaseweb_provider.errors import ClientConstructionError, ConfigLoadError, ProviderConfigError
from leaseweb_provider.models import ProviderBaseModel
from leaseweb_provider.registry import CapabilityRegistry, get_registry
from leaseweb_provider.schema import ProviderSchema, provider_schema
from leaseweb_provider.telemetry import mark_failed, traced_operation

logger = logging.getLogger(__name__)

__all__ = [
    "TYPE_NAME",
    "ProviderState",
    "MetadataResponse",
    "ConfigureResponse",
    "LeasewebProvider",
    "new",
]

TYPE_NAME = "leaseweb"


class ProviderState(str, Enum):
    UNINITIALIZED = "uninitialized"
    CONFIGURING = "configuring"
    CONFIGURED = "configured"
    CONFIGURATION_FAILED = "configuration_failed"


class MetadataResponse(ProviderBaseModel):
    type_name: str
    version: str


@dataclass(frozen=True)
class ConfigureResponse:
    """Result of ``configure``.

    Attributes:
        diagnostics: Everything worth telling the operator
        data_source_data: Client handle for data sources, None on failure
        resource_data: Client handle for resources, None on failure
    """

    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    data_source_data: LeasewebClient | None = None
    resource_data: LeasewebClient | None = None


class LeasewebProvider:
    """Provider facade implementing the host lifecycle calls.

    Args:
        version: Provider version, "dev" for local builds and "test" in tests
        env: Environment lookup, the process environment by default
        client_factory: Builds the shared client handle
        registry: Capability registry, the built-in one by default
    """

    def __init__(
        self,
        version: str,
        env: EnvironmentReader | None = None,
        client_factory: ClientFactory = new_client,
        registry: CapabilityRegistry | None = None,
    ):
        self.version = version
        self.env = env or OsEnvironmentReader()
        self.client_factory = client_factory
        self.registry = registry or get_registry()
        self._state = ProviderState.UNINITIALIZED
        self._client: LeasewebClient | None = None

    @property
    def state(self) -> ProviderState:
        return self._state

    @property
    def client(self) -> LeasewebClient | None:
        return self._client

    def metadata(self) -> MetadataResponse:
        return MetadataResponse(type_name=TYPE_NAME, version=self.version)

    def schema(self) -> ProviderSchema:
        return provider_schema()

    def configure(
        self,
        config: ProviderConfigModel | Mapping[str, Any],
        trace_context: Mapping[str, str] | None = None,
    ) -> ConfigureResponse:
        """Resolve the provider block and build the shared client handle.

        Args:
            config: The provider block, as a model or a raw mapping
            trace_context: Propagation headers used only to correlate the
                configure span and log records with the caller's trace

        Returns:
            Diagnostics, plus the client handle for data sources and
            resources when there is no error.
        """
        if self._state != ProviderState.UNINITIALIZED:
            diags = Diagnostics()
            diags.add_error(
                "Provider already configured",
                f"The provider was already configured in this process (state: {self._state.value}). "
                "Restart the plugin to configure it again.",
            )
            return ConfigureResponse(diagnostics=diags)

        self._state = ProviderState.CONFIGURING
        response: ConfigureResponse | None = None
        try:
            with traced_operation(
                "leaseweb.provider.configure",
                {"leaseweb.provider.version": self.version},
                carrier=trace_context,
            ) as span:
                response = self._configure(config)
                if response.diagnostics.has_error():
                    mark_failed(span, response.diagnostics.errors()[0].summary)
        except Exception as e:
            logger.exception("Provider configuration failed")
            diags = Diagnostics()
            diags.add_error(
                "Unable to configure Leaseweb provider",
                f"An unexpected error occurred: {log.get_log_context().mask(str(e))}",
            )
            response = ConfigureResponse(diagnostics=diags)
        finally:
            if response is not None and not response.diagnostics.has_error():
                self._client = response.data_source_data
                self._state = ProviderState.CONFIGURED
            else:
                self._state = ProviderState.CONFIGURATION_FAILED

        return response

    def _configure(self, config: ProviderConfigModel | Mapping[str, Any]) -> ConfigureResponse:
        if not isinstance(config, ProviderConfigModel):
            try:
                config = config_from_dict(config)
            except ConfigLoadError as e:
                return ConfigureResponse(diagnostics=Diagnostics([e.to_diagnostic()]))

        resolved, diags = ConfigResolver(self.env).resolve(config)
        if resolved is None or diags.has_error():
            return ConfigureResponse(diagnostics=diags)

        # The token must be masked before anything can log it.
        log.install_masking(resolved.token)
        log.set_field("leaseweb_host", resolved.host_override or "")
        log.set_field("leaseweb_scheme", resolved.scheme_override or "")
        log.set_field("leaseweb_token", resolved.token)

        try:
            client = client_from_config(resolved, self.version, self.client_factory)
        except ProviderConfigError as e:
            e.detail = log.get_log_context().mask(e.detail)
            diags.append(e.to_diagnostic())
            return ConfigureResponse(diagnostics=diags)
        except Exception as e:
            # Third-party factories may fail in any way; report, never raise.
            logger.exception("Client factory failed")
            reason = log.get_log_context().mask(str(e))
            diags.append(ClientConstructionError(reason).to_diagnostic())
            return ConfigureResponse(diagnostics=diags)

        logger.info("Configured Leaseweb client", extra={"log_fields": {"success": True}})
        return ConfigureResponse(diagnostics=diags, data_source_data=client, resource_data=client)

    def data_sources(self) -> list[type[Capability]]:
        return list(self.registry.data_source_constructors())

    def resources(self) -> list[type[Capability]]:
        return list(self.registry.resource_constructors())


def new(version: str) -> Callable[[], LeasewebProvider]:
    """Return a zero-argument constructor for the provider.

    The version is fixed when the plugin starts and handed to every provider
    instance; there is no module-level provider state.
    """

    def _factory() -> LeasewebProvider:
        return LeasewebProvider(version=version)

    return _factory
