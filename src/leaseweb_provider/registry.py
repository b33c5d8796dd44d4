"""Registry of the data sources and resources offered to the host.

The registry is a static, ordered list assembled once at import time. It does
not depend on whether the provider has been configured: the host may list
the available types at any point. The order below is the order the host sees.
"""

from leaseweb_provider.capabilities import dedicatedserver, dns, ipmgmt, publiccloud
from leaseweb_provider.capabilities.base import Capability, CapabilityKind, DataSource, Resource
from leaseweb_provider.models import ProviderBaseModel

__all__ = [
    "DATA_SOURCES",
    "RESOURCES",
    "RegistryEntry",
    "CapabilityRegistry",
    "build_registry",
    "get_registry",
]

DATA_SOURCES: tuple[type[DataSource], ...] = (
    publiccloud.InstancesDataSource,
    publiccloud.CredentialDataSource,
    dedicatedserver.ServerDataSource,
    dedicatedserver.ServersDataSource,
    dedicatedserver.ControlPanelsDataSource,
    dedicatedserver.OperatingSystemsDataSource,
    dedicatedserver.CredentialDataSource,
    publiccloud.ImagesDataSource,
    publiccloud.LoadBalancersDataSource,
    publiccloud.LoadBalancerListenersDataSource,
    publiccloud.TargetGroupsDataSource,
    publiccloud.ISOsDataSource,
    dns.ResourceRecordSetsDataSource,
    ipmgmt.IPsDataSource,
    ipmgmt.NullRouteHistoryDataSource,
)

RESOURCES: tuple[type[Resource], ...] = (
    publiccloud.InstanceResource,
    publiccloud.CredentialResource,
    dedicatedserver.ServerResource,
    dedicatedserver.CredentialResource,
    dedicatedserver.NotificationSettingDatatrafficResource,
    dedicatedserver.NotificationSettingBandwidthResource,
    dedicatedserver.InstallationResource,
    publiccloud.ImageResource,
    publiccloud.LoadBalancerResource,
    publiccloud.LoadBalancerListenerResource,
    publiccloud.TargetGroupResource,
    publiccloud.IPResource,
    publiccloud.InstanceIsoResource,
    dns.ResourceRecordSetsResource,
    ipmgmt.IPResource,
    ipmgmt.NullRouteResource,
)


class RegistryEntry(ProviderBaseModel):
    """A capability kind paired with its zero-argument constructor."""

    kind: CapabilityKind
    constructor: type[Capability]


class CapabilityRegistry(ProviderBaseModel):
    """Immutable, ordered registry of capability constructors."""

    data_sources: tuple[RegistryEntry, ...]
    resources: tuple[RegistryEntry, ...]

    def data_source_constructors(self) -> tuple[type[Capability], ...]:
        return tuple(entry.constructor for entry in self.data_sources)

    def resource_constructors(self) -> tuple[type[Capability], ...]:
        return tuple(entry.constructor for entry in self.resources)

    def type_names(self, provider_type_name: str) -> dict[str, list[str]]:
        """Full type names per kind, in registry order."""
        return {
            CapabilityKind.DATA_SOURCE.value: [
                ctor.type_name(provider_type_name) for ctor in self.data_source_constructors()
            ],
            CapabilityKind.RESOURCE.value: [
                ctor.type_name(provider_type_name) for ctor in self.resource_constructors()
            ],
        }


def build_registry(
    data_sources: tuple[type[DataSource], ...] = DATA_SOURCES,
    resources: tuple[type[Resource], ...] = RESOURCES,
) -> CapabilityRegistry:
    """Assemble a registry from constructor lists, keeping their order."""
    return CapabilityRegistry(
        data_sources=tuple(
            RegistryEntry(kind=CapabilityKind.DATA_SOURCE, constructor=ctor)
            for ctor in data_sources
        ),
        resources=tuple(
            RegistryEntry(kind=CapabilityKind.RESOURCE, constructor=ctor)
            for ctor in resources
        ),
    )


_registry = build_registry()


def get_registry() -> CapabilityRegistry:
    """Get the registry built at import time."""
    return _registry
