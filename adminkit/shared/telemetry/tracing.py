"""Span helpers for recording decisions on the active trace.

Only the OpenTelemetry API is used; when no SDK is configured the current
span is non-recording and these helpers are no-ops.
"""

from collections.abc import Mapping, Sequence

from opentelemetry import trace

SpanValue = str | int | float | bool | Sequence[str]


def annotate_current_span(attributes: Mapping[str, SpanValue | None]) -> None:
    """Add attributes to the current span. None values are skipped."""
    span = trace.get_current_span()
    if not span or not span.is_recording():
        return
    for key, value in attributes.items():
        if value is None:
            continue
        if isinstance(value, Sequence) and not isinstance(value, str):
            value = list(value)
        span.set_attribute(key, value)
