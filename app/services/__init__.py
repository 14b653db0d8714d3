"""Service layer for business logic."""

from .auth_service import AuthService
from .catalog_service import ServiceCatalogService
from .jwt_service import JWTService
from .user_service import UserService

__all__ = [
    "AuthService",
    "JWTService",
    "ServiceCatalogService",
    "UserService",
]
