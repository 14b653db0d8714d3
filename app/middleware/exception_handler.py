"""Global exception handlers."""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.utils.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BaseAppException,
    ConflictError,
    InvalidIdentifierError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Ordered most specific first; lookup walks the exception's MRO
STATUS_MAPPING: dict[type[BaseAppException], int] = {
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    InvalidIdentifierError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
}


def error_body(message: str, error_code: str, details: dict[str, Any] | None = None) -> dict:
    return {
        "success": False,
        "message": message,
        "error_code": error_code,
        "details": details or {},
    }


def status_for(exc: BaseAppException) -> int:
    """Resolve the HTTP status for an application exception."""
    for klass in type(exc).__mro__:
        if klass in STATUS_MAPPING:
            return STATUS_MAPPING[klass]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


class ExceptionHandlers:
    """Centralized exception handlers for the application."""

    @staticmethod
    async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
        """Handle all classified application exceptions."""

        logger.warning(
            f"Request rejected in {request.method} {request.url.path}: {exc.message}",
            extra={
                "error_code": exc.error_code,
                "path": str(request.url.path),
                "method": request.method,
            },
        )

        if isinstance(exc, AuthenticationError):
            # Same body for every authentication failure
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=error_body("Not authenticated", "UNAUTHENTICATED"),
                headers={"WWW-Authenticate": "Bearer"},
            )

        return JSONResponse(
            status_code=status_for(exc),
            content=error_body(exc.message, exc.error_code or "ERROR", exc.details),
        )

    @staticmethod
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Render request schema violations as a list of field-level messages."""

        errors = []
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
            message = str(error.get("msg", "Invalid value")).removeprefix("Value error, ")
            errors.append(f"{'.'.join(loc)}: {message}" if loc else message)

        logger.warning(
            f"Validation error in {request.method} {request.url.path}",
            extra={"path": str(request.url.path), "method": request.method, "errors": errors},
        )

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Validation failed", "VALIDATION_FAILED", {"errors": errors}),
        )

    @staticmethod
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        """Handle database integrity errors."""

        logger.error(
            f"Database integrity error in {request.method} {request.url.path}: {exc}",
            extra={"path": str(request.url.path), "method": request.method},
        )

        error_message = "Database constraint violation"
        error_code = "INTEGRITY_ERROR"

        lowered = str(exc).lower()
        if "unique" in lowered or "duplicate key" in lowered:
            error_message = "Resource already exists"
            error_code = "CONFLICT"
        elif "foreign key" in lowered:
            error_message = "Referenced resource not found"
            error_code = "FOREIGN_KEY_VIOLATION"

        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=error_body(error_message, error_code),
        )

    @staticmethod
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle FastAPI HTTP exceptions with consistent format."""

        error_code_mapping = {
            400: "BAD_REQUEST",
            401: "UNAUTHENTICATED",
            403: "FORBIDDEN",
            404: "NOT_FOUND",
            405: "METHOD_NOT_ALLOWED",
            409: "CONFLICT",
            500: "INTERNAL_ERROR",
        }

        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(
                str(exc.detail), error_code_mapping.get(exc.status_code, "HTTP_ERROR")
            ),
            headers=getattr(exc, "headers", None),
        )

    @staticmethod
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""

        logger.error(
            f"Unexpected error in {request.method} {request.url.path}: {exc}",
            extra={
                "path": str(request.url.path),
                "method": request.method,
                "exception_type": type(exc).__name__,
            },
            exc_info=True,
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error", "INTERNAL_ERROR"),
        )


def register_exception_handlers(app: Any) -> None:
    """Register all exception handlers with the FastAPI app."""

    handlers = ExceptionHandlers()

    app.add_exception_handler(BaseAppException, handlers.app_exception_handler)
    app.add_exception_handler(RequestValidationError, handlers.request_validation_handler)
    app.add_exception_handler(IntegrityError, handlers.integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, handlers.http_exception_handler)

    # Catch-all for unexpected errors
    app.add_exception_handler(Exception, handlers.general_exception_handler)
