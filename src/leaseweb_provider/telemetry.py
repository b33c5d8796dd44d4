"""Tracing helpers wrapping OpenTelemetry.

The provider only creates spans; exporting them is up to the embedding
process. Without a configured tracer provider OpenTelemetry hands out
non-recording spans and every call here is a no-op.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from opentelemetry import propagate, trace
from opentelemetry.trace import Status, StatusCode

from leaseweb_provider.version import PACKAGE_NAME, PACKAGE_VERSION

__all__ = ["traced_operation", "mark_failed", "get_current_trace_id"]


def _get_tracer() -> trace.Tracer:
    return trace.get_tracer(PACKAGE_NAME, PACKAGE_VERSION)


@contextmanager
def traced_operation(
    name: str,
    attributes: dict[str, Any] | None = None,
    carrier: Mapping[str, str] | None = None,
) -> Iterator[trace.Span]:
    """Context manager for tracing operations.

    Args:
        name: Operation name (e.g., "leaseweb.provider.configure")
        attributes: Initial span attributes; None values are skipped
        carrier: Propagation headers from the caller (e.g. ``traceparent``);
            the span becomes a child of the caller's span

    Example:
        ```python
        with traced_operation("leaseweb.provider.configure") as span:
            span.set_attribute("leaseweb.configured", True)
        ```
    """
    # Exceptions escaping the block are recorded on the span by OpenTelemetry.
    parent = propagate.extract(carrier) if carrier else None
    with _get_tracer().start_as_current_span(name, context=parent) as span:
        for key, value in (attributes or {}).items():
            if value is not None:
                span.set_attribute(key, value)
        yield span


def mark_failed(span: trace.Span, description: str) -> None:
    """Set an error status on ``span`` without raising."""
    span.set_status(Status(StatusCode.ERROR, description))


def get_current_trace_id() -> str | None:
    """Get the current trace ID for correlation with log records.

    Returns:
        Trace ID as hex string or None if not in a recording span
    """
    span = trace.get_current_span()
    if span.is_recording():
        return format(span.get_span_context().trace_id, "032x")
    return None
