"""Custom exceptions for the application."""

from typing import Any, Dict, Optional


class BaseAppException(Exception):
    """Base exception for every classified request failure."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationError(BaseAppException):
    """Raised when the caller cannot be authenticated."""

    reason = "authentication_failed"

    def __init__(self, message: str = "Not authenticated", **kwargs):
        super().__init__(message, error_code="UNAUTHENTICATED", **kwargs)


class MissingTokenError(AuthenticationError):
    """Raised when no bearer credential was presented."""

    reason = "missing_token"

    def __init__(self, message: str = "No bearer token provided", **kwargs):
        super().__init__(message, **kwargs)


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed or its signature does not verify."""

    reason = "invalid_token"

    def __init__(self, message: str = "Invalid token", **kwargs):
        super().__init__(message, **kwargs)


class TokenExpiredError(InvalidTokenError):
    """Raised when a token has expired."""

    reason = "token_expired"

    def __init__(self, message: str = "Token has expired", **kwargs):
        super().__init__(message, **kwargs)


class AccountNotFoundError(AuthenticationError):
    """Raised when a valid token names an account that no longer exists."""

    reason = "account_not_found"

    def __init__(self, message: str = "Account not found", **kwargs):
        super().__init__(message, **kwargs)


class AuthorizationError(BaseAppException):
    """Raised when authorization fails."""

    def __init__(self, message: str = "Access denied", **kwargs):
        super().__init__(message, error_code="FORBIDDEN", **kwargs)


class InsufficientRoleError(AuthorizationError):
    """Raised when the caller's role is not permitted for the operation."""

    def __init__(self, message: str = "Access denied: insufficient permissions", **kwargs):
        super().__init__(message, **kwargs)


class OwnershipError(AuthorizationError):
    """Raised when the caller neither owns the resource nor holds an override role."""

    def __init__(self, message: str = "You are not authorized to modify this service", **kwargs):
        super().__init__(message, **kwargs)


class InvalidIdentifierError(BaseAppException):
    """Raised when an identifier does not match the store's id format."""

    def __init__(self, message: str = "Invalid identifier format", **kwargs):
        super().__init__(message, error_code="INVALID_IDENTIFIER", **kwargs)


class ValidationError(BaseAppException):
    """Raised when field constraints are violated."""

    def __init__(self, message: str = "Validation failed", errors: Optional[list[str]] = None, **kwargs):
        super().__init__(message, error_code="VALIDATION_FAILED", **kwargs)
        if errors is not None:
            self.details.setdefault("errors", errors)


class NotFoundError(BaseAppException):
    """Raised when a resource is not found."""

    def __init__(self, message: str = "Resource not found", **kwargs):
        super().__init__(message, error_code="NOT_FOUND", **kwargs)


class ServiceNotFoundError(NotFoundError):
    """Raised when a service is not found."""

    def __init__(self, message: str = "Service not found", **kwargs):
        super().__init__(message, **kwargs)


class UserNotFoundError(NotFoundError):
    """Raised when user is not found."""

    def __init__(self, message: str = "User not found", **kwargs):
        super().__init__(message, **kwargs)


class ConflictError(BaseAppException):
    """Raised when there's a conflict (e.g., duplicate resource)."""

    def __init__(self, message: str = "Resource conflict", **kwargs):
        super().__init__(message, error_code="CONFLICT", **kwargs)


class EmailAlreadyExistsError(ConflictError):
    """Raised when email already exists."""

    def __init__(self, message: str = "Email already registered", **kwargs):
        super().__init__(message, **kwargs)
