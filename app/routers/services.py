"""Service catalog routes.

Each route authenticates the caller and applies the role gate through its
dependency; single-resource mutations then go through the loader and the
ownership check inside ``ServiceCatalogService``.
"""

import math

from fastapi import APIRouter, Depends, Query, Request, status

from app.config.settings import settings
from app.dependencies.auth import require_roles
from app.dependencies.services import get_catalog_service
from app.models.user import Role
from app.policies.base_policy import Identity
from app.policies.query_filters import build_owner_filter, build_service_filter
from app.schemas.common import BaseResponse, ErrorResponse
from app.schemas.service import (
    ServiceDetailResponse,
    ServiceListResponse,
    ServiceResponse,
)
from app.services.catalog_service import ServiceCatalogService

router = APIRouter(
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Role or ownership check failed"},
    }
)

ANY_ROLE = (Role.CLIENT, Role.VENDOR, Role.ADMIN)


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items, ``limit`` per page."""
    return math.ceil(total / limit) if limit else 0


def _list_response(services, total: int, page: int, limit: int) -> ServiceListResponse:
    return ServiceListResponse(
        success=True,
        count=len(services),
        total=total,
        page=page,
        total_pages=total_pages(total, limit),
        data=[ServiceResponse.model_validate(service) for service in services],
    )


@router.get("/", response_model=ServiceListResponse)
async def list_services(
    identity: Identity = Depends(require_roles(*ANY_ROLE)),
    catalog: ServiceCatalogService = Depends(get_catalog_service),
    category: str | None = Query(None, description="Exact category"),
    status_param: str | None = Query(None, alias="status", description="Ignored for clients"),
    min_price: str | None = Query(None, alias="minPrice", description="Inclusive lower bound"),
    max_price: str | None = Query(None, alias="maxPrice", description="Inclusive upper bound"),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Items per page"
    ),
):
    """List catalog services visible to the caller, newest first."""

    service_filter = build_service_filter(
        identity,
        {
            "status": status_param,
            "category": category,
            "minPrice": min_price,
            "maxPrice": max_price,
        },
    )
    services, total = await catalog.list_services(service_filter, page=page, limit=limit)
    return _list_response(services, total, page, limit)


@router.get("/my-services", response_model=ServiceListResponse)
async def list_my_services(
    identity: Identity = Depends(require_roles(Role.VENDOR)),
    catalog: ServiceCatalogService = Depends(get_catalog_service),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Items per page"
    ),
):
    """List every service owned by the calling vendor, whatever its status."""

    services, total = await catalog.list_services(
        build_owner_filter(identity), page=page, limit=limit
    )
    return _list_response(services, total, page, limit)


@router.get("/{service_id}", response_model=ServiceDetailResponse)
async def get_service(
    service_id: str,
    identity: Identity = Depends(require_roles(*ANY_ROLE)),
    catalog: ServiceCatalogService = Depends(get_catalog_service),
):
    """Get a single service by id."""

    service = await catalog.load(service_id)
    return ServiceDetailResponse(success=True, data=ServiceResponse.model_validate(service))


@router.post("/", response_model=ServiceDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_service(
    request: Request,
    identity: Identity = Depends(require_roles(Role.VENDOR)),
    catalog: ServiceCatalogService = Depends(get_catalog_service),
):
    """Create a service owned by the calling vendor."""

    service = await catalog.create(identity, request.json)
    return ServiceDetailResponse(
        success=True,
        message="Service created successfully",
        data=ServiceResponse.model_validate(service),
    )


@router.put("/{service_id}", response_model=ServiceDetailResponse)
async def update_service(
    service_id: str,
    request: Request,
    identity: Identity = Depends(require_roles(Role.VENDOR)),
    catalog: ServiceCatalogService = Depends(get_catalog_service),
):
    """Update a service; only its owner may do so."""

    # Body is read after the ownership check so non-owners always get 403
    service = await catalog.update(identity, service_id, request.json)
    return ServiceDetailResponse(
        success=True,
        message="Service updated successfully",
        data=ServiceResponse.model_validate(service),
    )


@router.delete("/{service_id}", response_model=BaseResponse)
async def delete_service(
    service_id: str,
    identity: Identity = Depends(require_roles(Role.VENDOR, Role.ADMIN)),
    catalog: ServiceCatalogService = Depends(get_catalog_service),
):
    """Delete a service; its owner or an admin may do so."""

    await catalog.delete(identity, service_id)
    return BaseResponse(success=True, message="Service deleted successfully")
