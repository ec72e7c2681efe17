"""Application DTOs (plain dataclasses, no ORM)."""

from adminkit.application.dtos.authorization import AuthorizationEvent
from adminkit.application.dtos.principal import PERMISSION_CLAIM_TYPE, Principal

__all__ = ["PERMISSION_CLAIM_TYPE", "AuthorizationEvent", "Principal"]
