"""Security adapters: bearer token verification."""

from adminkit.infrastructure.security.jwt import (
    create_access_token,
    principal_from_payload,
    verify_token,
)

__all__ = ["create_access_token", "principal_from_payload", "verify_token"]
