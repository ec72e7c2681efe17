"""Ports implemented by infrastructure or supplied by callers."""

from adminkit.application.interfaces.services import IAuthorizationAuditSink

__all__ = ["IAuthorizationAuditSink"]
