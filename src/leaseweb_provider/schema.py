"""Declarative schema of the provider block."""

from leaseweb_provider.client import DEFAULT_HOST, DEFAULT_SCHEME
from leaseweb_provider.config.env import HOST_ENV_VAR, SCHEME_ENV_VAR, TOKEN_ENV_VAR
from leaseweb_provider.models import ProviderBaseModel

__all__ = ["StringAttribute", "ProviderSchema", "provider_schema"]


class StringAttribute(ProviderBaseModel):
    """A string attribute of the provider block.

    Attributes:
        description: Text shown to the operator
        optional: Whether the attribute may be omitted
        sensitive: Whether the value must be hidden from output
    """

    description: str
    optional: bool = True
    sensitive: bool = False


class ProviderSchema(ProviderBaseModel):
    attributes: dict[str, StringAttribute]


def provider_schema() -> ProviderSchema:
    """Build the provider block schema."""
    return ProviderSchema(
        attributes={
            "host": StringAttribute(
                description=(
                    f'Host for Leaseweb API, defaults to "{DEFAULT_HOST}". '
                    f"May also be provided via {HOST_ENV_VAR} environment variable if present."
                ),
            ),
            "scheme": StringAttribute(
                description=(
                    f'Scheme for Leaseweb API, defaults to "{DEFAULT_SCHEME}". '
                    f"May also be provided via {SCHEME_ENV_VAR} environment variable if present."
                ),
            ),
            "token": StringAttribute(
                description=(
                    "The API token to use. By default it takes the value from the "
                    f"{TOKEN_ENV_VAR} environment variable if present."
                ),
                sensitive=True,
            ),
        }
    )
