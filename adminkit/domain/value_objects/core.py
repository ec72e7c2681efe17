"""Domain value objects for adminkit.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
import uuid
from dataclasses import dataclass

_WHITESPACE_RE = re.compile(r"\s")


@dataclass(frozen=True)
class PermissionCode:
    """Opaque permission token, conventionally '<EntityGroup>.<Action>'.

    Group codes (e.g. 'TenantManage') use the same type without an action.
    Equality is exact and case-sensitive.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate non-empty and free of whitespace.

        Raises:
            ValueError: If the code is empty or contains whitespace.
        """
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Permission code must be a non-empty string")
        if _WHITESPACE_RE.search(self.value):
            raise ValueError(f"Permission code must not contain whitespace: {self.value!r}")

    @property
    def action(self) -> str | None:
        """Return the part after the first '.', or None for group codes."""
        parts = self.value.split(".", 1)
        return parts[1] if len(parts) == 2 else None

    def __str__(self) -> str:
        return self.value


class EntityId:
    """Record identifiers: canonical form is a lowercase hyphenated UUID string."""

    @staticmethod
    def parse(raw: object) -> str | None:
        """Return the canonical identifier string, or None when raw does not parse.

        Never raises: query filters treat unparsable identifiers as absent.
        """
        if not isinstance(raw, str) or not raw.strip():
            return None
        try:
            return str(uuid.UUID(raw.strip()))
        except ValueError:
            return None

