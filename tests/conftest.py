"""
Global pytest configuration and fixtures.
"""

import logging

import pytest

from leaseweb_provider.config.env import EnvironmentReader
from leaseweb_provider.log import SecretMaskingFilter, reset_log_context


class CountingEnvironmentReader(EnvironmentReader):
    """Environment double that records every lookup."""

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.calls: list[str] = []

    def get(self, name: str) -> str:
        self.calls.append(name)
        return self.values.get(name, "")


@pytest.fixture
def counting_env():
    """Factory for environment doubles that count lookups."""
    return CountingEnvironmentReader


@pytest.fixture(autouse=True)
def isolate_logging():
    """Undo process-wide logging changes made by a test.

    Configuring the provider installs masking and structured fields for the
    whole process, and the CLI replaces the root handlers.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    reset_log_context()
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
        for log_filter in handler.filters[:]:
            if isinstance(log_filter, SecretMaskingFilter):
                handler.removeFilter(log_filter)
    root.setLevel(level)
