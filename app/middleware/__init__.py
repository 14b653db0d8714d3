"""Middleware package."""

from .exception_handler import ExceptionHandlers, register_exception_handlers
from .logging_middleware import RequestLoggingMiddleware

__all__ = [
    "ExceptionHandlers",
    "register_exception_handlers",
    "RequestLoggingMiddleware",
]
