"""Service dependency injection."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.database import get_db
from app.services.auth_service import AuthService
from app.services.catalog_service import ServiceCatalogService
from app.services.user_service import UserService


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AsyncGenerator[AuthService, None]:
    """Get AuthService instance."""
    yield AuthService(db)


async def get_user_service(db: AsyncSession = Depends(get_db)) -> AsyncGenerator[UserService, None]:
    """Get UserService instance."""
    yield UserService(db)


async def get_catalog_service(
    db: AsyncSession = Depends(get_db),
) -> AsyncGenerator[ServiceCatalogService, None]:
    """Get ServiceCatalogService instance."""
    yield ServiceCatalogService(db)
