"""Base policy classes and types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from app.models.user import Role


class Action(str, Enum):
    """Mutating actions guarded by ownership."""

    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, resolved once per request and passed explicitly."""

    id: str
    role: Role

    @classmethod
    def from_user(cls, user: Any) -> "Identity":
        return cls(id=str(user.id), role=Role(user.role))

    def owns(self, owner_id: Optional[str]) -> bool:
        """Check whether this identity is the given owner."""
        return owner_id is not None and str(owner_id) == self.id


@dataclass
class PolicyContext:
    """Context for policy evaluation."""

    identity: Identity
    resource: Optional[Any] = None


@dataclass
class PolicyResult:
    """Result of policy evaluation."""

    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls, reason: Optional[str] = None) -> "PolicyResult":
        """Create an allow result."""
        return cls(allowed=True, reason=reason)

    @classmethod
    def deny(cls, reason: str) -> "PolicyResult":
        """Create a deny result."""
        return cls(allowed=False, reason=reason)


class BasePolicy(ABC):
    """Base class for all authorization policies."""

    @abstractmethod
    def check(self, action: Action, context: PolicyContext) -> PolicyResult:
        """Check if action is allowed in the given context."""

    def _owner_id(self, resource: Any) -> Optional[str]:
        """Get the owner id recorded on a resource."""
        for attr in ("vendor_id", "owner_id", "user_id"):
            if hasattr(resource, attr):
                value = getattr(resource, attr)
                return str(value) if value is not None else None
        return None
