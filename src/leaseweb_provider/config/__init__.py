"""Provider configuration: tri-state values, environment lookup and resolution.

## Key Components

- `ProviderConfigModel`: The provider block as supplied by the host
- `ResolvedConfig`: The merged, validated settings handed to the client factory
- `ConfigResolver`: Applies config > environment precedence and validation
- `EnvironmentReader`: Injectable environment variable lookup

## Quick Example

```python
from leaseweb_provider.config import ConfigResolver, OsEnvironmentReader, config_from_dict

resolved, diags = ConfigResolver(OsEnvironmentReader()).resolve(
    config_from_dict({"host": "api.leaseweb.com"})
)
```
"""

from .env import (
    HOST_ENV_VAR,
    SCHEME_ENV_VAR,
    TOKEN_ENV_VAR,
    EnvironmentReader,
    MappingEnvironmentReader,
    OsEnvironmentReader,
)
from .loader import UNKNOWN, config_from_dict, load_config_file
from .models import ProviderConfigModel, ResolvedConfig
from .resolver import ConfigResolver, resolve_config
from .values import KnownValue, NullValue, StringValue, UnknownValue, known, null, unknown

__all__ = [
    # Values
    "NullValue",
    "UnknownValue",
    "KnownValue",
    "StringValue",
    "null",
    "unknown",
    "known",
    # Models
    "ProviderConfigModel",
    "ResolvedConfig",
    # Environment
    "EnvironmentReader",
    "OsEnvironmentReader",
    "MappingEnvironmentReader",
    "HOST_ENV_VAR",
    "SCHEME_ENV_VAR",
    "TOKEN_ENV_VAR",
    # Resolution
    "ConfigResolver",
    "resolve_config",
    # Loading
    "UNKNOWN",
    "config_from_dict",
    "load_config_file",
]
