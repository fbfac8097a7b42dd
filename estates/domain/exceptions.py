"""Domain exceptions for the estates platform.

A small closed set of typed failures. The presentation layer maps each
error_code to an HTTP status in one place (core.exception_handlers).
"""

from typing import Any


class EstatesException(Exception):
    """Base exception for all estates application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_type, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ResourceNotFoundException(EstatesException):
    """Raised when a referenced resource, parent or principal identity does not exist."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'property', 'identity').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class AuthenticationException(EstatesException):
    """Raised when no valid principal is present for a guarded route."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(EstatesException):
    """Raised when the principal does not own the target resource (or lacks authority)."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'property').
            action: Optional action that was attempted (e.g. 'update').
            message: Used as-is when resource/action are omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ValidationException(EstatesException):
    """Raised when a required value is absent or malformed on a create or insert path."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class StateConflictException(EstatesException):
    """Raised when a mutation would not change state or collides with existing data.

    Examples: new password equals the old one, new status equals the current
    status, or a unique column (email, username, address) is already taken.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "STATE_CONFLICT", details)
