"""Ownership rules for mutating catalog services."""

import logging
from typing import AbstractSet, Any

from app.models.user import Role

from .base_policy import Action, BasePolicy, Identity, PolicyContext, PolicyResult

logger = logging.getLogger(__name__)

# Roles that may bypass ownership, per operation. Update is strictly owner-only.
OVERRIDE_ROLES: dict[Action, frozenset[Role]] = {
    Action.UPDATE: frozenset(),
    Action.DELETE: frozenset({Role.ADMIN}),
}


class ServicePolicy(BasePolicy):
    """Ownership arbiter for services: owner, or a role in the override set."""

    def check(self, action: Action, context: PolicyContext) -> PolicyResult:
        """Check a mutation against an already loaded resource."""

        if action not in OVERRIDE_ROLES:
            return PolicyResult.deny(f"Unknown action: {action}")

        if context.resource is None:
            # Ownership is never decided against a missing resource
            return PolicyResult.deny("Resource must be loaded before ownership check")

        result = self.authorize_mutation(
            context.identity, context.resource, OVERRIDE_ROLES[action]
        )
        if not result.allowed:
            return PolicyResult.deny(f"You are not authorized to {action.value} this service")
        return result

    def authorize_mutation(
        self, identity: Identity, resource: Any, override: AbstractSet[Role]
    ) -> PolicyResult:
        """Allow iff the identity owns the resource or its role is in ``override``."""

        if identity.owns(self._owner_id(resource)):
            return PolicyResult.allow("Resource owner access")

        if identity.role in override:
            return PolicyResult.allow(f"{identity.role.value} override")

        logger.warning(
            "Ownership check denied",
            extra={
                "identity_id": identity.id,
                "role": identity.role.value,
                "resource_id": getattr(resource, "id", None),
            },
        )
        return PolicyResult.deny("You are not authorized to modify this service")


def authorize_mutation(
    identity: Identity, resource: Any, override: AbstractSet[Role]
) -> PolicyResult:
    """Module-level shortcut for :meth:`ServicePolicy.authorize_mutation`."""
    return ServicePolicy().authorize_mutation(identity, resource, override)
