"""FastAPI dependencies."""

from .auth import get_current_identity, require_roles
from app.config.database import get_db
from .services import get_auth_service, get_catalog_service, get_user_service

__all__ = [
    "get_current_identity",
    "require_roles",
    "get_db",
    "get_auth_service",
    "get_catalog_service",
    "get_user_service",
]
