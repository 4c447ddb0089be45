"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    VideoTubeException (base)
       │
       ├── AuthenticationError (401)        ← Missing credentials
       │      ├── InvalidCredentialsError   ← Wrong username/email/password
       │      ├── TokenInvalidError         ← Bad signature, malformed token
       │      ├── TokenExpiredError         ← Access token past expiry
       │      └── RotationDeniedError       ← Refresh token reuse/mismatch/expiry
       ├── AuthorizationError (403)         ← Not the owner of the resource
       ├── NotFoundError (404)              ← Resource not found
       │      ├── UserNotFoundError
       │      └── TargetNotFoundError       ← Toggle target does not exist
       ├── ValidationError (400)            ← Invalid input data
       │      ├── InvalidIdentifierError    ← Malformed resource id
       │      └── SelfReferenceDeniedError  ← Subscribing to yourself
       ├── ConflictError (409)              ← Resource already exists
       └── ServiceUnavailableError (503)    ← Storage unavailable

Usage:
======
    from videotube.shared.core.exceptions import NotFoundError, ValidationError

    # Raise with automatic status code
    raise NotFoundError("Playlist", playlist_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Playlist with id 'abc' not found"}}

    # Raise with additional details
    raise ValidationError("Invalid email format", details={"field": "email"})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "ROTATION_DENIED",
            "message": "Refresh token is expired or used",
            "details": {}
        }
    }

Messages never contain secrets, token contents or password hashes.
"""

from typing import Any, Optional


class VideoTubeException(Exception):
    """
    Base exception for all VideoTube application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(VideoTubeException):
    """
    Authentication failed error (401 Unauthorized).

    Raised directly when no credentials were presented at all. The
    subclasses below narrow the reason so clients can react differently
    (e.g. rotate on TOKEN_EXPIRED, full login on everything else).
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "AUTHENTICATION_ERROR",
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code=error_code,
            details=details,
        )


class InvalidCredentialsError(AuthenticationError):
    """Login or password check failed. Same message for unknown user and wrong password."""

    def __init__(self, message: str = "Invalid user credentials") -> None:
        super().__init__(message=message, error_code="INVALID_CREDENTIALS")


class TokenInvalidError(AuthenticationError):
    """Access token has a bad signature, is malformed, or is the wrong type."""

    def __init__(self, message: str = "Invalid access token") -> None:
        super().__init__(message=message, error_code="TOKEN_INVALID")


class TokenExpiredError(AuthenticationError):
    """Access token is past its expiry. Clients should attempt a rotation."""

    def __init__(self, message: str = "Access token has expired") -> None:
        super().__init__(message=message, error_code="TOKEN_EXPIRED")


class RotationDeniedError(AuthenticationError):
    """
    Refresh token rotation refused.

    Covers bad signature, expiry, unknown principal and a refresh token
    that no longer matches the stored one. Forces a full re-login.
    """

    def __init__(self, message: str = "Refresh token is expired or used") -> None:
        super().__init__(message=message, error_code="ROTATION_DENIED")


class AuthorizationError(VideoTubeException):
    """
    Authorization failed error (403 Forbidden).

    Raised when user is authenticated but does not own the resource.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="FORBIDDEN",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(VideoTubeException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.

    Example:
        raise NotFoundError("Video", video_id)
        # Message: "Video with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: str) -> None:
        super().__init__(resource="User", resource_id=user_id)


class TargetNotFoundError(NotFoundError):
    """The entity a like/subscription points at does not exist."""

    def __init__(self, target: str, target_id: str) -> None:
        super().__init__(resource=target, resource_id=target_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(VideoTubeException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details,
        )


class InvalidIdentifierError(ValidationError):
    """A resource id is not a well-formed identifier."""

    def __init__(self, label: str = "resource") -> None:
        super().__init__(
            message=f"Invalid {label} ID",
            error_code="INVALID_IDENTIFIER",
        )


class SelfReferenceDeniedError(ValidationError):
    """A principal tried to subscribe to their own channel."""

    def __init__(self, message: str = "You cannot subscribe to your own channel") -> None:
        super().__init__(message=message, error_code="SELF_REFERENCE_DENIED")


class ConflictError(VideoTubeException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.

    Example:
        raise ConflictError("Playlist with same name already exists")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """
    Duplicate resource error.

    Specific case of conflict when trying to create duplicate resource.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(VideoTubeException):
    """
    Service temporarily unavailable error (503).

    Raised when the database stays unreachable after a retry.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )
