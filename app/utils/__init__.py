"""Utility functions and classes."""

from .exceptions import *
from .security import *

__all__ = [
    # Security
    "hash_password",
    "verify_password",
    "generate_object_id",
    "is_valid_object_id",
    # Exceptions
    "BaseAppException",
    "AuthenticationError",
    "AuthorizationError",
    "InvalidIdentifierError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
