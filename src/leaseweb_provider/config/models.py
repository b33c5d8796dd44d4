"""Pydantic models for provider configuration.

``ProviderConfigModel`` is what the host sends on ``configure``; every field
is a tri-state value. ``ResolvedConfig`` is the result of merging it with the
environment and is the only thing the client factory ever sees.
"""

from pydantic import Field

from leaseweb_provider.models import ProviderBaseModel

from .values import NullValue, StringValue

__all__ = ["ProviderConfigModel", "ResolvedConfig"]


class ProviderConfigModel(ProviderBaseModel):
    """Provider block as supplied by the host.

    Attributes:
        host: Leaseweb API host
        scheme: Leaseweb API scheme
        token: Leaseweb API token (sensitive)

    Example:
        >>> from leaseweb_provider.config.values import known, unknown
        >>> config = ProviderConfigModel(host=known("api.leaseweb.com"), token=unknown())
    """

    host: StringValue = Field(default_factory=NullValue)
    scheme: StringValue = Field(default_factory=NullValue)
    token: StringValue = Field(default_factory=NullValue, repr=False)


class ResolvedConfig(ProviderBaseModel):
    """Fully decided connection settings.

    An override set to ``None`` tells the client factory to apply its own
    default; it is never the empty string.

    Attributes:
        token: Leaseweb API token, never empty
        host_override: API host, or None for the client default
        scheme_override: API scheme, or None for the client default
    """

    token: str = Field(min_length=1, repr=False)
    host_override: str | None = None
    scheme_override: str | None = None
