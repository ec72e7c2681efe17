"""Shared utilities: datetime and generators."""

from adminkit.shared.utils.datetime import add_months, ensure_utc, utc_now
from adminkit.shared.utils.generators import generate_id

__all__ = [
    "add_months",
    "ensure_utc",
    "generate_id",
    "utc_now",
]
