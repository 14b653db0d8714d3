"""Translate caller role and query parameters into a service selection predicate."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import ColumnElement

from app.models.service import Service, ServiceStatus
from app.models.user import Role

from .base_policy import Identity


@dataclass(frozen=True)
class ServiceFilter:
    """Selection predicate over services; ``None`` fields are unrestricted."""

    status: Optional[str] = None
    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    vendor_id: Optional[str] = None

    def clauses(self) -> list[ColumnElement[bool]]:
        """Render the predicate as SQLAlchemy where-clauses."""
        conditions: list[ColumnElement[bool]] = []
        if self.vendor_id is not None:
            conditions.append(Service.vendor_id == self.vendor_id)
        if self.status is not None:
            conditions.append(Service.status == self.status)
        if self.category is not None:
            conditions.append(Service.category == self.category)
        if self.min_price is not None:
            conditions.append(Service.price >= self.min_price)
        if self.max_price is not None:
            conditions.append(Service.price <= self.max_price)
        return conditions


def parse_price_bound(raw: Optional[str]) -> Optional[float]:
    """Parse a price bound; anything unparsable is treated as absent."""
    if raw is None:
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def build_service_filter(identity: Identity, params: Mapping[str, Optional[str]]) -> ServiceFilter:
    """
    Build the predicate for the general catalog listing.

    ``params`` carries the raw query values under ``status``, ``category``,
    ``minPrice`` and ``maxPrice``. Clients always see active services only;
    vendors and admins may filter by any status.
    """
    if identity.role == Role.CLIENT:
        status = ServiceStatus.ACTIVE.value
    else:
        status = params.get("status") or None

    return ServiceFilter(
        status=status,
        category=params.get("category") or None,
        min_price=parse_price_bound(params.get("minPrice")),
        max_price=parse_price_bound(params.get("maxPrice")),
    )


def build_owner_filter(identity: Identity) -> ServiceFilter:
    """Predicate for the caller's own services, every status included."""
    return ServiceFilter(vendor_id=identity.id)
