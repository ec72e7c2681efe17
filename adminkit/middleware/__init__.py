"""ASGI middleware."""

from adminkit.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
