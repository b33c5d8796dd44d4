"""Tri-state configuration values.

A provider attribute handed over by the host is in exactly one of three
states:

- ``NullValue``: the user did not set the attribute.
- ``UnknownValue``: the attribute depends on a value the host has not
  computed yet (e.g. the output of a resource that is still to be applied).
- ``KnownValue``: the attribute has a concrete string value.

The variants are separate classes so callers dispatch on the type instead of
querying flags:

    >>> value = known("api.leaseweb.com")
    >>> isinstance(value, KnownValue)
    True
    >>> value.value
    'api.leaseweb.com'
"""

from typing import Literal, Union

from leaseweb_provider.models import ProviderBaseModel

__all__ = [
    "NullValue",
    "UnknownValue",
    "KnownValue",
    "StringValue",
    "null",
    "unknown",
    "known",
]


class NullValue(ProviderBaseModel):
    """The attribute was not set."""

    state: Literal["null"] = "null"

    def __str__(self) -> str:
        return "<null>"


class UnknownValue(ProviderBaseModel):
    """The attribute will only be known later in the host's plan."""

    state: Literal["unknown"] = "unknown"

    def __str__(self) -> str:
        return "<unknown>"


class KnownValue(ProviderBaseModel):
    """The attribute has a concrete value (which may be the empty string)."""

    state: Literal["known"] = "known"
    value: str


StringValue = Union[NullValue, UnknownValue, KnownValue]

_NULL = NullValue()
_UNKNOWN = UnknownValue()


def null() -> NullValue:
    return _NULL


def unknown() -> UnknownValue:
    return _UNKNOWN


def known(value: str) -> KnownValue:
    return KnownValue(value=value)
