"""Leaseweb API client handle.

The HTTP client itself lives outside this package. What the provider builds
here is the immutable connection handle shared by every data source and
resource: API token, host, scheme and the user agent to send. Defaults for
host and scheme are applied here, never by the configuration resolver.

The handle is frozen, so it can be read from any number of threads without
synchronization.
"""

import logging
from typing import Protocol

from pydantic import Field, SecretStr, ValidationError, field_validator

from leaseweb_provider.config.models import ResolvedConfig
from leaseweb_provider.errors import ClientConstructionError
from leaseweb_provider.models import ProviderBaseModel

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_SCHEME",
    "ClientOptions",
    "LeasewebClient",
    "ClientFactory",
    "new_client",
    "client_from_config",
]

DEFAULT_HOST = "api.leaseweb.com"
DEFAULT_SCHEME = "https"

_SUPPORTED_SCHEMES = ("http", "https")


class ClientOptions(ProviderBaseModel):
    """Optional connection settings. ``None`` selects the client default."""

    host: str | None = None
    scheme: str | None = None


class LeasewebClient(ProviderBaseModel):
    """Immutable connection handle for the Leaseweb API.

    Attributes:
        token: API token, never rendered in repr or dumps
        host: API host name
        scheme: URL scheme, "http" or "https"
        version: Provider version, sent as part of the user agent
    """

    token: SecretStr
    host: str = DEFAULT_HOST
    scheme: str = DEFAULT_SCHEME
    version: str = Field(min_length=1)

    @field_validator("host")
    @classmethod
    def _check_host(cls, value: str) -> str:
        if not value or "/" in value or any(c.isspace() for c in value):
            raise ValueError(f"invalid host {value!r}")
        return value

    @field_validator("scheme")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        if value not in _SUPPORTED_SCHEMES:
            raise ValueError(f"unsupported scheme {value!r}, expected one of {_SUPPORTED_SCHEMES}")
        return value

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}"

    @property
    def user_agent(self) -> str:
        return f"terraform-provider-leaseweb/{self.version}"


class ClientFactory(Protocol):
    """Builds the shared client handle from validated settings."""

    def __call__(self, token: str, options: ClientOptions, version: str) -> LeasewebClient: ...


def new_client(token: str, options: ClientOptions, version: str) -> LeasewebClient:
    """Create a client handle, applying defaults for unset options.

    Raises:
        ClientConstructionError: If an override value is malformed.
    """
    settings: dict[str, str] = {}
    if options.host is not None:
        settings["host"] = options.host
    if options.scheme is not None:
        settings["scheme"] = options.scheme

    try:
        client = LeasewebClient(token=SecretStr(token), version=version, **settings)
    except ValidationError as e:
        reasons = "; ".join(str(err["msg"]) for err in e.errors())
        raise ClientConstructionError(reasons) from e

    logger.debug(f"Created Leaseweb client for {client.base_url}")
    return client


def client_from_config(
    config: ResolvedConfig, version: str, factory: ClientFactory = new_client
) -> LeasewebClient:
    """Create a client handle from resolved settings using ``factory``."""
    options = ClientOptions(host=config.host_override, scheme=config.scheme_override)
    return factory(config.token, options, version)
