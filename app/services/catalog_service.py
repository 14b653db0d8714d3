"""Service catalog operations behind the authorization pipeline."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.models.service import Service
from app.policies.base_policy import Action, Identity
from app.policies.guards import require
from app.policies.query_filters import ServiceFilter
from app.schemas.service import ServiceRecord, ServiceUpdate
from app.utils.exceptions import (
    InvalidIdentifierError,
    ServiceNotFoundError,
    ValidationError,
)
from app.utils.security import is_valid_object_id

logger = logging.getLogger(__name__)

# Never accepted from a caller's update patch
IMMUTABLE_FIELDS = frozenset({"id", "vendor_id", "vendorId", "owner_id", "ownerId", "created_at"})

# Zero-argument coroutine returning the decoded request body, e.g. ``request.json``
BodyReader = Callable[[], Awaitable[Any]]


def strip_immutable_fields(patch: dict[str, Any]) -> dict[str, Any]:
    """Drop owner and identity fields from an update patch."""
    return {key: value for key, value in patch.items() if key not in IMMUTABLE_FIELDS}


async def read_json_object(read_body: BodyReader) -> dict[str, Any]:
    """Decode a request body that must be a JSON object."""
    try:
        payload = await read_body()
    except ValueError:
        raise ValidationError(errors=["body: Invalid JSON"])

    if not isinstance(payload, dict):
        raise ValidationError(errors=["body: Expected a JSON object"])

    return payload


def validation_messages(exc: PydanticValidationError) -> list[str]:
    """Flatten pydantic errors into ``"field: message"`` strings."""
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body")
        message = error["msg"].removeprefix("Value error, ")
        messages.append(f"{field}: {message}" if field else message)
    return messages


class ServiceCatalogService:
    """Load, list and mutate services; every mutation is ownership-checked."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def load(self, service_id: str) -> Service:
        """
        Fetch a service by id.

        A malformed id fails with ``InvalidIdentifierError`` before any store
        access; a well-formed id with no record fails with ``ServiceNotFoundError``.
        """
        if not is_valid_object_id(service_id):
            raise InvalidIdentifierError("Invalid service ID format")

        service = await self.db.get(Service, service_id.lower())
        if service is None:
            raise ServiceNotFoundError()

        return service

    async def list_services(
        self,
        service_filter: ServiceFilter,
        page: int = 1,
        limit: int = 20,
    ) -> tuple[list[Service], int]:
        """List services matching a predicate, newest first."""

        conditions = service_filter.clauses()

        count_result = await self.db.execute(
            select(func.count()).select_from(Service).where(*conditions)
        )
        total = count_result.scalar_one()

        query = (
            select(Service)
            .where(*conditions)
            .order_by(Service.created_at.desc(), Service.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.db.execute(query)
        return list(result.unique().scalars().all()), total

    async def create(self, identity: Identity, read_body: BodyReader) -> Service:
        """Create a service owned by the caller."""

        data = await read_json_object(read_body)
        record = self._validate_record(strip_immutable_fields(data))

        service = Service(**record.model_dump(mode="json"), vendor_id=identity.id)
        self.db.add(service)
        await self.db.commit()
        service = await self._reload(service.id)

        logger.info(
            "Service created",
            extra={"service_id": service.id, "vendor_id": identity.id},
        )
        return service

    async def update(self, identity: Identity, service_id: str, read_body: BodyReader) -> Service:
        """
        Apply a partial update; only the owner may update.

        The body is read only once ownership is established, so a non-owner is
        refused whatever they sent.
        """

        service = await self.load(service_id)
        require(identity, Action.UPDATE, "service", resource=service)
        patch = await read_json_object(read_body)

        try:
            changes = ServiceUpdate.model_validate(strip_immutable_fields(patch)).model_dump(
                exclude_unset=True, mode="json"
            )
        except PydanticValidationError as exc:
            raise ValidationError(errors=validation_messages(exc))

        merged = {field: getattr(service, field) for field in ServiceRecord.model_fields}
        merged.update(changes)
        self._validate_record(merged)

        for field, value in changes.items():
            setattr(service, field, value)

        await self.db.commit()
        service = await self._reload(service.id)

        logger.info(
            "Service updated",
            extra={"service_id": service.id, "identity_id": identity.id, "fields": sorted(changes)},
        )
        return service

    async def delete(self, identity: Identity, service_id: str) -> None:
        """Delete a service; the owner or an admin may delete."""

        service = await self.load(service_id)
        require(identity, Action.DELETE, "service", resource=service)

        await self.db.delete(service)
        await self.db.commit()

        logger.info(
            "Service deleted",
            extra={"service_id": service_id, "identity_id": identity.id},
        )

    async def _reload(self, service_id: str) -> Service:
        result = await self.db.execute(
            select(Service)
            .where(Service.id == service_id)
            .options(joinedload(Service.vendor))
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one()

    @staticmethod
    def _validate_record(data: dict[str, Any]) -> ServiceRecord:
        """Run the store schema over a full record."""
        try:
            return ServiceRecord.model_validate(data)
        except PydanticValidationError as exc:
            raise ValidationError(errors=validation_messages(exc))
