"""Authorization service: exact-match permission checks over a principal's claims."""

from __future__ import annotations

import logging

from adminkit.application.dtos.authorization import AuthorizationEvent
from adminkit.application.dtos.principal import Principal
from adminkit.application.interfaces.services import IAuthorizationAuditSink
from adminkit.domain.enums import Decision
from adminkit.domain.exceptions import AuthorizationException
from adminkit.shared.telemetry.tracing import annotate_current_span

logger = logging.getLogger(__name__)


class LoggingAuditSink:
    """Default sink: log lines plus attributes on the current trace span."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def record(self, event: AuthorizationEvent) -> None:
        annotate_current_span(
            {
                "authz.principal_id": event.principal_id,
                "authz.required_code": event.required_code,
                "authz.outcome": event.outcome.value,
                "authz.held_codes": event.held_codes if event.outcome is Decision.DENY else None,
            }
        )
        if event.outcome is Decision.ALLOW:
            self._log.debug(
                "Permission verification successful: user %s has permission %s",
                event.principal_id,
                event.required_code,
            )
            return
        self._log.warning(
            "Permission verification failed: user %s lacks permission %s",
            event.principal_id,
            event.required_code,
        )
        self._log.debug(
            "User %s has permissions: %s",
            event.principal_id,
            ", ".join(event.held_codes),
        )


class AuthorizationService:
    """Stateless evaluator: Allow iff the required code is literally held.

    No prefix, wildcard, or group expansion; holding 'Menu' or 'SystemSetting.View'
    grants nothing for 'Menu.View'. Composing grants is the issuer's job.
    """

    def __init__(self, audit_sink: IAuthorizationAuditSink | None = None) -> None:
        self.audit_sink = audit_sink or LoggingAuditSink()

    def authorize(self, principal: Principal | None, required: str) -> Decision:
        """Return ALLOW or DENY. Never raises; a missing principal or claim set is DENY."""
        codes = principal.permission_codes if principal is not None else frozenset()
        decision = Decision.ALLOW if required in codes else Decision.DENY
        self._emit(principal, required, decision)
        return decision

    def is_allowed(self, principal: Principal | None, required: str) -> bool:
        return self.authorize(principal, required) is Decision.ALLOW

    def require(self, principal: Principal | None, required: str) -> Principal:
        """Return the principal on ALLOW; raise AuthorizationException on DENY."""
        decision = self.authorize(principal, required)
        if decision is Decision.DENY or principal is None:
            raise AuthorizationException(permission=required)
        return principal

    def _emit(self, principal: Principal | None, required: str, decision: Decision) -> None:
        held: tuple[str, ...] = ()
        if decision is Decision.DENY and principal is not None:
            held = principal.held_order
        event = AuthorizationEvent(
            principal_id=principal.display_id if principal is not None else "Unknown",
            required_code=required,
            outcome=decision,
            held_codes=held,
        )
        try:
            self.audit_sink.record(event)
        except Exception:
            logger.exception(
                "Authorization audit sink failed for %s (%s)", required, decision.value
            )
