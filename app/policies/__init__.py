"""Authorization policies system."""

from .base_policy import Action, BasePolicy, Identity, PolicyContext, PolicyResult
from .guards import allow, require, require_role
from .query_filters import ServiceFilter, build_owner_filter, build_service_filter
from .service_policy import OVERRIDE_ROLES, ServicePolicy, authorize_mutation

__all__ = [
    "Action",
    "BasePolicy",
    "Identity",
    "PolicyContext",
    "PolicyResult",
    "ServicePolicy",
    "OVERRIDE_ROLES",
    "authorize_mutation",
    "allow",
    "require",
    "require_role",
    "ServiceFilter",
    "build_service_filter",
    "build_owner_filter",
]
