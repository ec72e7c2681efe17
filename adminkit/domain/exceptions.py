"""Domain exceptions for adminkit.

Defines domain-level exceptions that represent rule violations. These
exceptions are independent of infrastructure concerns. The presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class AdminKitException(Exception):
    """Base exception for all adminkit errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, code).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(AdminKitException):
    """Raised when input validation fails (e.g. unknown sort field)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(AdminKitException):
    """Raised when the caller cannot be identified (missing or invalid token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(AdminKitException):
    """Raised by callers that turn a Deny decision into a rejection."""

    def __init__(
        self,
        permission: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with the permission code that was required.

        Args:
            permission: Permission code the caller lacked (e.g. 'Menu.View').
            message: Human-readable message; replaced when permission is given.
        """
        details: dict[str, Any] = {}
        if permission:
            message = f"Permission denied: {permission} required"
            details["permission"] = permission
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(AdminKitException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SqlNotConfiguredException(AdminKitException):
    """Raised when an operation requires a SQL database that is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class PermissionCatalogException(AdminKitException):
    """Base for errors that make the permission catalog inconsistent.

    Raised while the catalog is built at startup; the process must not
    serve traffic after one of these.
    """


class DuplicatePermissionCodeException(PermissionCatalogException):
    """Raised when two declarations define the same permission or group code."""

    def __init__(self, code: str, first_site: str, second_site: str) -> None:
        """Initialize with the duplicated code and both declaration sites.

        Args:
            code: The permission or group code declared twice.
            first_site: Where the code was first declared (e.g. 'group Role').
            second_site: Where the duplicate was found.
        """
        super().__init__(
            f"Permission code '{code}' declared twice: {first_site} and {second_site}",
            "DUPLICATE_PERMISSION_CODE",
            {"code": code, "sites": [first_site, second_site]},
        )


class UnknownParentGroupException(PermissionCatalogException):
    """Raised when a group names a parent group that is not declared (or is cyclic)."""

    def __init__(self, group_code: str, parent_code: str) -> None:
        super().__init__(
            f"Permission group '{group_code}' references unknown parent group '{parent_code}'",
            "UNKNOWN_PARENT_GROUP",
            {"group_code": group_code, "parent_code": parent_code},
        )


class CatalogNotInitializedException(AdminKitException):
    """Raised when the process-wide catalog is read before initialize_catalog()."""

    def __init__(self) -> None:
        super().__init__(
            "Permission catalog has not been initialized",
            "CATALOG_NOT_INITIALIZED",
        )
