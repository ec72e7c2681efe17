"""DTOs for authorization decisions (no dependency on transport)."""

from dataclasses import dataclass, field

from adminkit.domain.enums import Decision


@dataclass(frozen=True)
class AuthorizationEvent:
    """Structured record of one authorization decision.

    held_codes is filled only on Deny (diagnostics); it is empty on Allow.
    """

    principal_id: str
    required_code: str
    outcome: Decision
    held_codes: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "principalId": self.principal_id,
            "requiredCode": self.required_code,
            "outcome": self.outcome.value,
        }
        if self.outcome is Decision.DENY:
            data["heldCodes"] = list(self.held_codes)
        return data
