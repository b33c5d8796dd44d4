"""Centralized package information for the Leaseweb provider.

This module provides a single source of truth for the package name and
version, avoiding duplication across the codebase.
"""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["PACKAGE_NAME", "PACKAGE_VERSION"]

# Package name constant
PACKAGE_NAME = "leaseweb-provider"

# Local builds that are not installed report "dev".
try:
    PACKAGE_VERSION = version(PACKAGE_NAME)
except PackageNotFoundError:
    PACKAGE_VERSION = "dev"
