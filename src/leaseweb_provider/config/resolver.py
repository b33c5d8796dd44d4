"""Provider configuration resolver.

Merges the provider block with environment variables. Priority order for each
attribute:

1. Value set in the provider block - highest priority
2. Environment variable (``LEASEWEB_HOST``, ``LEASEWEB_SCHEME``, ``LEASEWEB_TOKEN``)
3. Client default - host and scheme only, applied by the client factory

The checks run in a fixed order and stop at the first failure. An unknown
token is rejected before the environment is read at all, and an empty token
after merging is rejected before any client settings are produced.
"""

import logging

from leaseweb_provider.diagnostics import Diagnostics
from leaseweb_provider.errors import MissingCredentialError, ProviderConfigError, UnknownValueError

from .env import HOST_ENV_VAR, SCHEME_ENV_VAR, TOKEN_ENV_VAR, EnvironmentReader
from .models import ProviderConfigModel, ResolvedConfig
from .values import KnownValue, NullValue, StringValue, UnknownValue

logger = logging.getLogger(__name__)

__all__ = ["ConfigResolver", "resolve_config"]


class ConfigResolver:
    """Resolves a ``ProviderConfigModel`` against an environment.

    Example:
        >>> from leaseweb_provider.config.env import MappingEnvironmentReader
        >>> resolver = ConfigResolver(MappingEnvironmentReader({"LEASEWEB_TOKEN": "abc123"}))
        >>> resolved, diags = resolver.resolve(ProviderConfigModel())
        >>> resolved.host_override is None
        True
    """

    def __init__(self, env: EnvironmentReader):
        self.env = env

    def resolve(self, config: ProviderConfigModel) -> tuple[ResolvedConfig | None, Diagnostics]:
        """Resolve the configuration.

        Returns:
            The resolved settings and the diagnostics. The settings are None
            whenever an error diagnostic was recorded.
        """
        diags = Diagnostics()
        try:
            resolved = self._resolve(config)
        except ProviderConfigError as e:
            logger.debug(f"Provider configuration rejected: {e.summary}")
            diags.append(e.to_diagnostic())
            return None, diags

        return resolved, diags

    def _resolve(self, config: ProviderConfigModel) -> ResolvedConfig:
        if isinstance(config.token, UnknownValue):
            raise UnknownValueError("token")

        host = self._merge(config.host, HOST_ENV_VAR)
        scheme = self._merge(config.scheme, SCHEME_ENV_VAR)
        token = self._merge(config.token, TOKEN_ENV_VAR)

        if token == "":
            raise MissingCredentialError("token")

        return ResolvedConfig(
            token=token,
            host_override=host or None,
            scheme_override=scheme or None,
        )

    def _merge(self, value: StringValue, env_var: str) -> str:
        # Only null falls through to the environment. A known value wins even
        # when empty; an unknown one means no override.
        if isinstance(value, NullValue):
            return self.env.get(env_var)
        if isinstance(value, KnownValue):
            return value.value
        return ""


def resolve_config(
    config: ProviderConfigModel, env: EnvironmentReader
) -> tuple[ResolvedConfig | None, Diagnostics]:
    """Resolve ``config`` against ``env``. See ``ConfigResolver``."""
    return ConfigResolver(env).resolve(config)
