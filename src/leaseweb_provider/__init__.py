"""Leaseweb provider - configuration resolution and capability registry.

This package turns the provider block supplied by the host runtime, together
with the ``LEASEWEB_*`` environment variables, into one validated, immutable
client handle, and publishes the data sources and resources the provider
offers.

## Key Modules

- `leaseweb_provider.provider`: `LeasewebProvider`, the host lifecycle calls
- `leaseweb_provider.config`: Tri-state values, environment lookup, resolution
- `leaseweb_provider.diagnostics`: Diagnostics returned to the operator
- `leaseweb_provider.log`: Logging setup and secret masking
- `leaseweb_provider.registry`: Ordered data source and resource constructors

## Quick Start

```python
from leaseweb_provider import LeasewebProvider

provider = LeasewebProvider(version="dev")
response = provider.configure({"token": "..."})
for diagnostic in response.diagnostics:
    print(diagnostic)
```
"""

from .provider import ConfigureResponse, LeasewebProvider, MetadataResponse, ProviderState, new
from .version import PACKAGE_NAME, PACKAGE_VERSION

__all__ = [
    "LeasewebProvider",
    "ProviderState",
    "MetadataResponse",
    "ConfigureResponse",
    "new",
    "PACKAGE_NAME",
    "PACKAGE_VERSION",
]
