"""Authentication dependencies for FastAPI."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.models.user import Role
from app.policies.base_policy import Identity
from app.policies.guards import require_role
from app.services.auth_service import AuthService
from app.utils.exceptions import AuthenticationError

from .services import get_auth_service

logger = logging.getLogger(__name__)

# Security scheme for Bearer tokens
security = HTTPBearer(auto_error=False)


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> Identity:
    """Resolve the bearer token to an Identity or fail with a generic 401."""

    token = credentials.credentials if credentials else None

    try:
        return await auth_service.verify_credential(token)
    except AuthenticationError as exc:
        # Keep the precise reason in logs only
        logger.info("Authentication rejected", extra={"reason": exc.reason})
        raise AuthenticationError() from exc


def require_roles(*roles: Role) -> Callable[..., Awaitable[Identity]]:
    """
    Build a dependency that authenticates the caller and applies the role gate.

    Usage:
        identity: Identity = Depends(require_roles(Role.VENDOR, Role.ADMIN))
    """
    permitted_roles = frozenset(roles)

    async def dependency(identity: Identity = Depends(get_current_identity)) -> Identity:
        return require_role(identity, permitted_roles)

    return dependency
