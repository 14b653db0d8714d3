"""Test configuration and fixtures."""

import uuid
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from functools import lru_cache

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config.database import get_async_engine, get_async_session_local, reset_engines
from app.config.settings import settings
from app.main import app
from app.models import Base, Role, User
from app.policies.base_policy import Identity
from app.services.jwt_service import JWTService
from app.utils.security import hash_password

TEST_PASSWORD = "Secret123!"
SERVICES_URL = "/api/services/"


@lru_cache(maxsize=1)
def _password_hash() -> str:
    """Hash once; bcrypt is deliberately slow."""
    return hash_password(TEST_PASSWORD)


@dataclass
class Account:
    """A stored user together with its identity and auth headers."""

    user: User
    identity: Identity
    token: str

    @property
    def id(self) -> str:
        return self.user.id

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


def service_payload(**overrides) -> dict:
    """Valid service creation payload."""
    payload = {
        "title": "Signature Haircut",
        "description": "Wash, cut and blow-dry with a senior stylist",
        "price": 45.5,
        "duration": 60,
        "category": "Hair",
    }
    payload.update(overrides)
    return payload


@pytest_asyncio.fixture
async def setup_test_database(tmp_path) -> AsyncGenerator[None, None]:
    """Fresh SQLite file database per test."""
    settings.TESTING = True
    settings.DATABASE_URL = f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    reset_engines()

    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
    reset_engines()


@pytest_asyncio.fixture
async def db_session(setup_test_database):
    """Database session bound to the test database."""
    session_local = get_async_session_local()
    async with session_local() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(setup_test_database) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_account(db_session):
    """Factory storing a user with the given role and issuing a token for it."""

    async def _create(role: Role, name: str | None = None, email: str | None = None) -> Account:
        unique_id = uuid.uuid4().hex[:8]
        user = User(
            name=name or f"{role.value.title()} {unique_id}",
            email=email or f"{role.value}_{unique_id}@example.com",
            password_hash=_password_hash(),
            role=role.value,
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)

        token = JWTService().create_access_token(user.id, user.role)
        return Account(user=user, identity=Identity.from_user(user), token=token)

    return _create


@pytest_asyncio.fixture
async def vendor(create_account) -> Account:
    return await create_account(Role.VENDOR, name="Vera Vendor")


@pytest_asyncio.fixture
async def other_vendor(create_account) -> Account:
    return await create_account(Role.VENDOR, name="Otto Vendor")


@pytest_asyncio.fixture
async def client_account(create_account) -> Account:
    return await create_account(Role.CLIENT, name="Cleo Client")


@pytest_asyncio.fixture
async def admin(create_account) -> Account:
    return await create_account(Role.ADMIN, name="Ada Admin")


@pytest.fixture
def create_service(async_client):
    """Factory creating a service through the API as the given vendor."""

    async def _create(owner: Account, **overrides) -> dict:
        response = await async_client.post(
            SERVICES_URL, json=service_payload(**overrides), headers=owner.headers
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
