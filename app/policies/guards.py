"""Guard helpers for authorization checks."""

import logging
from typing import AbstractSet, Any, Optional

from app.models.user import Role
from app.utils.exceptions import (
    AuthenticationError,
    InsufficientRoleError,
    OwnershipError,
)

from .base_policy import Action, BasePolicy, Identity, PolicyContext
from .service_policy import ServicePolicy

logger = logging.getLogger(__name__)

# Policy registry
POLICY_REGISTRY: dict[str, type[BasePolicy]] = {
    "service": ServicePolicy,
}


def allow(identity: Identity, permitted_roles: AbstractSet[Role]) -> bool:
    """Role gate: True iff the identity's role is one of ``permitted_roles``."""
    return identity.role in permitted_roles


def require_role(identity: Optional[Identity], permitted_roles: AbstractSet[Role]) -> Identity:
    """
    Require that the identity holds one of the permitted roles.

    Fails closed: an empty role set rejects everybody, and a missing identity
    is an authentication failure rather than an authorization one.

    Usage:
        require_role(identity, {Role.VENDOR, Role.ADMIN})
    """
    if identity is None:
        raise AuthenticationError()

    if not allow(identity, permitted_roles):
        logger.warning(
            "Role gate denied",
            extra={
                "identity_id": identity.id,
                "role": identity.role.value,
                "permitted_roles": sorted(role.value for role in permitted_roles),
            },
        )
        raise InsufficientRoleError()

    return identity


def require(
    identity: Identity,
    action: Action,
    resource_type: str = "service",
    resource: Any | None = None,
) -> None:
    """
    Require that identity can perform action on resource.
    Raises OwnershipError if not allowed.

    Usage:
        require(identity, Action.UPDATE, "service", resource=service)
    """
    context = PolicyContext(identity=identity, resource=resource)

    policy_class = POLICY_REGISTRY.get(resource_type, ServicePolicy)
    policy = policy_class()
    result = policy.check(action, context)

    if not result.allowed:
        raise OwnershipError(result.reason or "Access denied")
