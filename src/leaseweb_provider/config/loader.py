"""Decoding of provider blocks into ``ProviderConfigModel``.

The host hands the provider block over as a plain mapping. Missing keys and
``None`` become null values, strings become known values and the ``UNKNOWN``
marker stands for a value the host has not computed yet.

Provider blocks can also be read from YAML files, either flat or nested
under a ``provider`` key:

```yaml
provider:
  host: "api.leaseweb.com"
  scheme: "https"
```
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from leaseweb_provider.errors import ConfigLoadError

from .models import ProviderConfigModel
from .values import StringValue, known, null, unknown

logger = logging.getLogger(__name__)

__all__ = ["UNKNOWN", "config_from_dict", "load_config_file"]


class _Unknown:
    """Marker for a value that is not known yet."""

    _instance = None

    def __new__(cls) -> "_Unknown":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNKNOWN"


UNKNOWN = _Unknown()

_FIELDS = tuple(ProviderConfigModel.model_fields)


def _to_value(path: str, raw: Any) -> StringValue:
    if raw is None:
        return null()
    if raw is UNKNOWN:
        return unknown()
    if isinstance(raw, str):
        return known(raw)
    raise ConfigLoadError(
        "Invalid provider attribute",
        f"Attribute '{path}' must be a string, got {type(raw).__name__}.",
        path,
    )


def config_from_dict(data: Mapping[str, Any] | None) -> ProviderConfigModel:
    """Build a configuration model from a provider block mapping.

    Raises:
        ConfigLoadError: If the block has unsupported attributes or values.
    """
    data = data or {}
    if not isinstance(data, Mapping):
        raise ConfigLoadError(
            "Invalid provider block",
            f"Expected a mapping of attributes, got {type(data).__name__}.",
        )
    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise ConfigLoadError(
            "Invalid provider attribute",
            f"Attribute names must be strings, got: {', '.join(map(repr, bad_keys))}.",
        )

    unexpected = sorted(set(data) - set(_FIELDS))
    if unexpected:
        raise ConfigLoadError(
            "Unsupported provider attribute",
            f"The provider block does not support: {', '.join(unexpected)}. "
            f"Supported attributes are: {', '.join(_FIELDS)}.",
            unexpected[0],
        )

    return ProviderConfigModel(**{name: _to_value(name, data.get(name)) for name in _FIELDS})


def load_config_file(path: Path) -> ProviderConfigModel:
    """Load a provider block from a YAML file.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigLoadError("Unable to read provider configuration", str(e)) from e
    except yaml.YAMLError as e:
        raise ConfigLoadError("Invalid provider configuration file", str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            "Invalid provider configuration file",
            f"Expected a mapping in {path}, got {type(data).__name__}.",
        )
    if "provider" in data:
        data = data["provider"] or {}
        if not isinstance(data, dict):
            raise ConfigLoadError(
                "Invalid provider configuration file",
                f"The 'provider' key in {path} must hold a mapping.",
            )

    logger.debug(f"Loaded provider configuration from {path}")
    return config_from_dict(data)
