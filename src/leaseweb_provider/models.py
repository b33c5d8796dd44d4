"""Base Pydantic model for the Leaseweb provider.

Every value that crosses a component boundary (configuration, resolved
settings, diagnostics, schema, client handle) inherits from this class so
that all of them share the same configuration:

- Strict field validation (no extra fields allowed)
- Immutable instances, safe to share between threads

Example:
    >>> from leaseweb_provider.models import ProviderBaseModel
    >>>
    >>> class Endpoint(ProviderBaseModel):
    ...     host: str
    >>>
    >>> Endpoint(host="api.leaseweb.com").model_dump()
    {'host': 'api.leaseweb.com'}
"""

from pydantic import BaseModel, ConfigDict


class ProviderBaseModel(BaseModel):
    """Base model for all provider Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable for thread safety
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
