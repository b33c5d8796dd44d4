"""Data sources and resources exposed by the provider, grouped by service."""

from .base import Capability, CapabilityKind, DataSource, Resource

__all__ = ["Capability", "CapabilityKind", "DataSource", "Resource"]
