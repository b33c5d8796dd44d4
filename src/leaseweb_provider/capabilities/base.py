"""Base classes for data sources and resources.

A capability is constructed by the host through a zero-argument constructor
(the class itself) and receives the shared client handle afterwards through
``configure``. Reading and reconciling remote state is implemented by the
individual service packages, not here.
"""

import logging
from enum import Enum
from typing import ClassVar

from leaseweb_provider.client import LeasewebClient
from leaseweb_provider.diagnostics import Diagnostics

logger = logging.getLogger(__name__)

__all__ = ["CapabilityKind", "Capability", "DataSource", "Resource"]


class CapabilityKind(str, Enum):
    DATA_SOURCE = "data-source"
    RESOURCE = "resource"


class Capability:
    """Common behaviour of data sources and resources.

    Subclasses set ``type_suffix``; the full type name is the provider type
    name followed by the suffix, e.g. ``leaseweb_dedicated_server``.
    """

    kind: ClassVar[CapabilityKind]
    type_suffix: ClassVar[str]

    def __init__(self) -> None:
        self.client: LeasewebClient | None = None

    @classmethod
    def type_name(cls, provider_type_name: str) -> str:
        return f"{provider_type_name}_{cls.type_suffix}"

    def metadata(self, provider_type_name: str) -> str:
        return self.type_name(provider_type_name)

    def configure(self, provider_data: object | None) -> Diagnostics:
        """Receive the shared client handle.

        The host may call this before the provider itself is configured, in
        which case ``provider_data`` is None and nothing happens.
        """
        diags = Diagnostics()
        if provider_data is None:
            return diags

        if not isinstance(provider_data, LeasewebClient):
            label = "Data Source" if self.kind == CapabilityKind.DATA_SOURCE else "Resource"
            logger.warning(
                "%s received %s instead of a client", type(self).__name__, type(provider_data).__name__
            )
            diags.add_error(
                f"Unexpected {label} Configure Type",
                f"Expected LeasewebClient, got: {type(provider_data).__name__}. "
                "Please report this issue to the provider developers.",
            )
            return diags

        self.client = provider_data
        return diags


class DataSource(Capability):
    """Read-only view of remote state."""

    kind = CapabilityKind.DATA_SOURCE


class Resource(Capability):
    """Remote object with a managed lifecycle."""

    kind = CapabilityKind.RESOURCE
