"""Environment variable lookup.

The resolver never touches ``os.environ`` directly; it goes through an
``EnvironmentReader`` so tests can hand in a fixed mapping and count lookups.
"""

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping

__all__ = [
    "HOST_ENV_VAR",
    "SCHEME_ENV_VAR",
    "TOKEN_ENV_VAR",
    "EnvironmentReader",
    "OsEnvironmentReader",
    "MappingEnvironmentReader",
    "get_env_flag",
]

HOST_ENV_VAR = "LEASEWEB_HOST"
SCHEME_ENV_VAR = "LEASEWEB_SCHEME"
TOKEN_ENV_VAR = "LEASEWEB_TOKEN"


class EnvironmentReader(ABC):
    """Read-only view of named environment variables."""

    @abstractmethod
    def get(self, name: str) -> str:
        """Return the value of ``name``, or the empty string when it is not set."""
        pass


class OsEnvironmentReader(EnvironmentReader):
    """Reads the live process environment on every call."""

    def get(self, name: str) -> str:
        return os.environ.get(name, "")


class MappingEnvironmentReader(EnvironmentReader):
    """Reads from a fixed mapping instead of the process environment."""

    def __init__(self, values: Mapping[str, str] | None = None):
        self._values = dict(values or {})

    def get(self, name: str) -> str:
        return self._values.get(name, "")


def get_env_flag(env_var: str, default: bool = False, env: EnvironmentReader | None = None) -> bool:
    """Get a boolean flag from an environment variable.

    Args:
        env_var: Name of the environment variable
        default: Default value if environment variable is not set
        env: Environment to read, the process environment by default

    Returns:
        True if the environment variable is set to "1", "true", or "yes" (case insensitive)
        False otherwise
    """
    value = (env or OsEnvironmentReader()).get(env_var).lower()
    return value in ("1", "true", "yes") if value else default
