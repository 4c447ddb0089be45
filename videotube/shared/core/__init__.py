"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from videotube.shared.core.logging import logger, get_logger
    from videotube.shared.core.exceptions import VideoTubeException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from videotube.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from videotube.shared.core.exceptions import (
    VideoTubeException,
    AuthenticationError,
    InvalidCredentialsError,
    TokenInvalidError,
    TokenExpiredError,
    RotationDeniedError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    TargetNotFoundError,
    ValidationError,
    InvalidIdentifierError,
    SelfReferenceDeniedError,
    ConflictError,
    DuplicateResourceError,
    ServiceUnavailableError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "VideoTubeException",
    "AuthenticationError",
    "InvalidCredentialsError",
    "TokenInvalidError",
    "TokenExpiredError",
    "RotationDeniedError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "TargetNotFoundError",
    "ValidationError",
    "InvalidIdentifierError",
    "SelfReferenceDeniedError",
    "ConflictError",
    "DuplicateResourceError",
    "ServiceUnavailableError",
]
