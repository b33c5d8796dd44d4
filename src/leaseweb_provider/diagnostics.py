"""Diagnostics reported back to the host.

Diagnostics are the only way this layer talks to the operator about
problems: nothing raised inside configuration handling reaches the host as an
exception. Each diagnostic is attached to an attribute path (``token``,
``host``...) or to the provider block as a whole (empty path).

Example:
    >>> diags = Diagnostics()
    >>> diags.add_attribute_error("token", "Missing Leaseweb API token", "Set it.")
    >>> diags.has_error()
    True
"""

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

from leaseweb_provider.models import ProviderBaseModel

__all__ = ["Severity", "Diagnostic", "Diagnostics", "ROOT_PATH"]

# Path used for diagnostics that are not tied to a single attribute.
ROOT_PATH = ""


class Severity(str, Enum):
    """Diagnostic severity."""

    ERROR = "error"
    INFO = "info"


class Diagnostic(ProviderBaseModel):
    """A single validation or configuration problem.

    Attributes:
        path: Attribute path the diagnostic refers to, empty for the whole block
        severity: Error or informational
        summary: Short one-line description
        detail: Longer, remediation-oriented explanation
    """

    path: str = ROOT_PATH
    severity: Severity
    summary: str
    detail: str = ""

    def __str__(self) -> str:
        location = f" (at {self.path})" if self.path else ""
        return f"{self.severity.value.capitalize()}: {self.summary}{location}"


class Diagnostics:
    """Ordered collection of diagnostics produced by one operation.

    Only accumulates; callers decide when to stop by checking ``has_error()``
    after each stage.
    """

    def __init__(self, diagnostics: Iterable[Diagnostic] | None = None):
        self._items: list[Diagnostic] = list(diagnostics or [])

    def append(self, diagnostic: Diagnostic) -> None:
        self._items.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        self._items.extend(diagnostics)

    def add_error(self, summary: str, detail: str = "") -> None:
        self.add_attribute_error(ROOT_PATH, summary, detail)

    def add_attribute_error(self, path: str, summary: str, detail: str = "") -> None:
        self.append(Diagnostic(path=path, severity=Severity.ERROR, summary=summary, detail=detail))

    def add_info(self, summary: str, detail: str = "") -> None:
        self.add_attribute_info(ROOT_PATH, summary, detail)

    def add_attribute_info(self, path: str, summary: str, detail: str = "") -> None:
        self.append(Diagnostic(path=path, severity=Severity.INFO, summary=summary, detail=detail))

    def has_error(self) -> bool:
        """Return True if any error severity diagnostic has been recorded."""
        return any(d.severity == Severity.ERROR for d in self._items)

    def errors(self) -> list[Diagnostic]:
        return [d for d in self._items if d.severity == Severity.ERROR]

    def for_path(self, path: str) -> list[Diagnostic]:
        return [d for d in self._items if d.path == path]

    def to_list(self) -> list[dict[str, Any]]:
        """Serialize to JSON-friendly dictionaries."""
        return [d.model_dump(mode="json") for d in self._items]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Diagnostics({self._items!r})"
