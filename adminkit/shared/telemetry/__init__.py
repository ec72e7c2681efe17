"""Telemetry helpers: logging setup and span annotation."""

from adminkit.shared.telemetry.logging import get_logger, setup_logging
from adminkit.shared.telemetry.tracing import annotate_current_span

__all__ = ["annotate_current_span", "get_logger", "setup_logging"]
