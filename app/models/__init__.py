"""Database models."""

from .base import Base, ObjectIdMixin, TimestampMixin
from .service import Service, ServiceCategory, ServiceStatus
from .user import Role, User

__all__ = [
    "Base",
    "ObjectIdMixin",
    "TimestampMixin",
    "Role",
    "User",
    "Service",
    "ServiceCategory",
    "ServiceStatus",
]
