"""JWT token creation and verification for bearer authentication.

Uses adminkit.core.config for secret, algorithm and the permission claim type.
Tokens are normally issued by an external identity service; create_access_token
exists for tooling and tests.
"""

from collections.abc import Iterable
from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from adminkit.application.dtos.principal import Principal
from adminkit.core.config import get_settings
from adminkit.shared.utils.datetime import utc_now


def create_access_token(
    subject: str,
    permissions: Iterable[str] = (),
    *,
    name: str | None = None,
    expires_delta: timedelta | None = None,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Create a signed JWT carrying sub, optional name and the permission claim.

    Args:
        subject: Principal id (sub claim).
        permissions: Permission codes, written under settings.permission_claim_type.
        name: Optional display name (name claim).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.
        extra_claims: Additional claims merged in last.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    to_encode: dict[str, Any] = {
        "sub": subject,
        settings.permission_claim_type: list(permissions),
        "exp": utc_now() + ttl,
    }
    if name:
        to_encode["name"] = name
    if extra_claims:
        to_encode.update(extra_claims)
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub.

    Raises:
        ValueError: If token is invalid, expired, or missing required claims.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload


def principal_from_payload(payload: dict[str, Any]) -> Principal:
    """Build a Principal from a verified token payload (sub, name, permission claim)."""
    name = payload.get("name")
    return Principal.from_claims(
        str(payload["sub"]),
        payload,
        name=name if isinstance(name, str) else None,
        claim_type=get_settings().permission_claim_type,
    )
