"""Configuration error taxonomy.

These exceptions are raised inside the configuration pipeline to stop it at
the first failing stage. They never reach the host: the provider converts
them to diagnostics with ``to_diagnostic()``.
"""

from leaseweb_provider.diagnostics import ROOT_PATH, Diagnostic, Severity

__all__ = [
    "ProviderConfigError",
    "UnknownValueError",
    "MissingCredentialError",
    "ClientConstructionError",
    "ConfigLoadError",
]


class ProviderConfigError(Exception):
    """Base class for configuration failures that map to a diagnostic.

    Attributes:
        path: Attribute path the error refers to, empty for the whole block
        summary: Short one-line description
        detail: Remediation-oriented explanation
    """

    def __init__(self, summary: str, detail: str = "", path: str = ROOT_PATH):
        super().__init__(summary)
        self.summary = summary
        self.detail = detail
        self.path = path

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            path=self.path, severity=Severity.ERROR, summary=self.summary, detail=self.detail
        )


class UnknownValueError(ProviderConfigError):
    """The API token depends on a value the host has not computed yet."""

    def __init__(self, path: str = "token"):
        super().__init__(
            "Unknown Leaseweb API token",
            "The provider cannot create the Leaseweb API client as there is an unknown "
            "configuration value for the Leaseweb API token. Either target apply the source "
            "of the value first, set the value statically in the configuration, or use the "
            "LEASEWEB_TOKEN environment variable.",
            path,
        )


class MissingCredentialError(ProviderConfigError):
    """No API token was found in the configuration or the environment."""

    def __init__(self, path: str = "token"):
        super().__init__(
            "Missing Leaseweb API token",
            "The provider cannot create the Leaseweb API client as there is a missing or empty "
            "value for the Leaseweb API token. Set the token value in the configuration or use "
            "the LEASEWEB_TOKEN environment variable. If either is already set, ensure the "
            "value is not empty.",
            path,
        )


class ClientConstructionError(ProviderConfigError):
    """The client factory rejected the resolved settings."""

    def __init__(self, reason: str):
        super().__init__(
            "Unable to create Leaseweb API client",
            f"An unexpected error occurred when creating the Leaseweb API client: {reason}",
        )
        self.reason = reason


class ConfigLoadError(ProviderConfigError):
    """The provider block could not be decoded into a configuration model."""
