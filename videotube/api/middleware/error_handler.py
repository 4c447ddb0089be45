"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "ROTATION_DENIED",
            "message": "Refresh token is expired or used",
            "details": {}
        }
    }

Exception Handling:
===================
1. VideoTubeException subclasses → Use their status_code and to_dict()
2. Request / pydantic validation errors → 400 VALIDATION_ERROR
3. Other exceptions → 500 with generic message (details hidden)

Validation details keep only location, message and type of each error.
The offending input is dropped, since it may be a password.

Usage:
======
    from videotube.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from videotube.shared.core.exceptions import VideoTubeException
from videotube.shared.core.logging import logger


def _error_summary(errors: Sequence[Any]) -> list[dict[str, Any]]:
    """Reduce pydantic error dicts to JSON-safe fields without the input value."""
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": str(error.get("msg", "")),
            "type": str(error.get("type", "")),
        }
        for error in errors
    ]


def _validation_response(request: Request, errors: Sequence[Any]) -> JSONResponse:
    summary = _error_summary(errors)
    logger.warning(
        "Validation error",
        errors=summary,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": {"errors": summary},
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(VideoTubeException)
    async def videotube_exception_handler(
        request: Request,
        exc: VideoTubeException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from VideoTubeException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request validation errors.

        These occur when path, query or body don't match the expected schema.
        """
        return _validation_response(request, exc.errors())

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Handle pydantic validation errors raised inside handlers."""
        return _validation_response(request, exc.errors())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "details": {},
                }
            },
        )
