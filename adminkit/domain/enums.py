"""Domain enumerations for adminkit."""

from enum import Enum


class Decision(str, Enum):
    """Outcome of an authorization check. Exactly one per evaluation."""

    ALLOW = "allow"
    DENY = "deny"
