"""API routers."""

from . import auth, services, users

__all__ = ["auth", "services", "users"]
