"""Service interfaces (ports) for the application layer.

Protocols define contracts for collaborators the core calls out to (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from adminkit.application.dtos.authorization import AuthorizationEvent


class IAuthorizationAuditSink(Protocol):
    """Receives one structured event per authorization decision (audit/observability)."""

    def record(self, event: AuthorizationEvent) -> None:
        """Record the event. Must not raise for the decision to stand; failures are logged."""
