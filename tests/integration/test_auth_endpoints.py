"""Integration tests for signup, login, profile and credential rejection."""

import pytest
from fastapi import status
from httpx import AsyncClient

from app.models.user import Role
from app.services.jwt_service import JWTService

pytestmark = pytest.mark.asyncio

UNAUTHENTICATED_BODY = {
    "success": False,
    "message": "Not authenticated",
    "error_code": "UNAUTHENTICATED",
    "details": {},
}


def signup_payload(**overrides) -> dict:
    payload = {
        "name": "Maya Stylist",
        "email": "maya@example.com",
        "password": "Secret123!",
        "role": "vendor",
    }
    payload.update(overrides)
    return payload


class TestSignupAndLogin:
    """Account creation and token issue."""

    async def test_signup_returns_token(self, async_client: AsyncClient):
        response = await async_client.post("/api/auth/signup", json=signup_payload())

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        assert data["token_type"] == "Bearer"
        assert data["user"]["role"] == "vendor"
        assert data["user"]["email"] == "maya@example.com"
        assert "password" not in data["user"]
        assert "password_hash" not in data["user"]

        me = await async_client.get(
            "/api/users/me", headers={"Authorization": f"Bearer {data['token']}"}
        )
        assert me.status_code == status.HTTP_200_OK
        assert me.json()["id"] == data["user"]["id"]

    async def test_signup_defaults_to_client(self, async_client: AsyncClient):
        payload = signup_payload()
        del payload["role"]

        response = await async_client.post("/api/auth/signup", json=payload)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["user"]["role"] == "client"

    async def test_signup_cannot_create_admin(self, async_client: AsyncClient):
        response = await async_client.post("/api/auth/signup", json=signup_payload(role="admin"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "VALIDATION_FAILED"

    async def test_duplicate_email_conflicts(self, async_client: AsyncClient):
        await async_client.post("/api/auth/signup", json=signup_payload())

        response = await async_client.post(
            "/api/auth/signup", json=signup_payload(email="MAYA@example.com", role="client")
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error_code"] == "CONFLICT"

    async def test_signup_validation_errors_are_listed(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/auth/signup", json=signup_payload(email="not-an-email", password="abc")
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        errors = response.json()["details"]["errors"]
        assert any(error.startswith("email:") for error in errors)
        assert any(error.startswith("password:") for error in errors)

    async def test_login(self, async_client: AsyncClient):
        await async_client.post("/api/auth/signup", json=signup_payload())

        response = await async_client.post(
            "/api/auth/login", json={"email": "maya@example.com", "password": "Secret123!"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["role"] == "vendor"
        assert response.json()["expires_in"] > 0

    async def test_login_wrong_password(self, async_client: AsyncClient):
        await async_client.post("/api/auth/signup", json=signup_payload())

        response = await async_client.post(
            "/api/auth/login", json={"email": "maya@example.com", "password": "Wrong123!"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error_code"] == "UNAUTHENTICATED"

    async def test_login_unknown_email(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/auth/login", json={"email": "nobody@example.com", "password": "Secret123!"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestCredentialRejection:
    """Every authentication failure looks the same to the caller."""

    async def test_missing_token(self, async_client: AsyncClient):
        response = await async_client.get("/api/users/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == UNAUTHENTICATED_BODY
        assert response.headers["www-authenticate"] == "Bearer"

    async def test_malformed_token(self, async_client: AsyncClient):
        response = await async_client.get(
            "/api/users/me", headers={"Authorization": "Bearer garbage"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == UNAUTHENTICATED_BODY

    async def test_non_bearer_scheme(self, async_client: AsyncClient, vendor):
        response = await async_client.get(
            "/api/users/me", headers={"Authorization": f"Basic {vendor.token}"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == UNAUTHENTICATED_BODY

    async def test_expired_token(self, async_client: AsyncClient, vendor):
        token = JWTService(access_token_expire_minutes=-5).create_access_token(
            vendor.id, Role.VENDOR
        )

        response = await async_client.get(
            "/api/services/", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == UNAUTHENTICATED_BODY

    async def test_token_for_missing_account(self, async_client: AsyncClient):
        token = JWTService().create_access_token("0" * 24, Role.ADMIN)

        response = await async_client.get(
            "/api/services/", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == UNAUTHENTICATED_BODY


class TestProfile:
    """The caller's own account."""

    async def test_me_reports_stored_role(self, async_client: AsyncClient, client_account):
        response = await async_client.get("/api/users/me", headers=client_account.headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == client_account.id
        assert data["role"] == "client"
        assert data["name"] == "Cleo Client"

    async def test_get_profile(self, async_client: AsyncClient, vendor):
        response = await async_client.get("/api/users/profile", headers=vendor.headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["email"] == vendor.user.email

    async def test_update_profile(self, async_client: AsyncClient, vendor):
        response = await async_client.put(
            "/api/users/profile",
            json={"name": "Vera Renamed", "phone": "+1 555 123 4567", "role": "admin"},
            headers=vendor.headers,
        )

        assert response.status_code == status.HTTP_200_OK
        user = response.json()["user"]
        assert user["name"] == "Vera Renamed"
        assert user["phone"] == "+1 555 123 4567"
        assert user["role"] == "vendor"

    async def test_update_profile_rejects_bad_phone(self, async_client: AsyncClient, vendor):
        response = await async_client.put(
            "/api/users/profile", json={"phone": "call me"}, headers=vendor.headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["details"]["errors"][0].startswith("phone:")


class TestApplicationSurface:
    """Health route and request tracing headers."""

    async def test_health(self, async_client: AsyncClient):
        response = await async_client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "healthy"

    async def test_request_id_is_echoed(self, async_client: AsyncClient, vendor):
        response = await async_client.get(
            "/api/users/me", headers={**vendor.headers, "X-Request-ID": "trace-123"}
        )

        assert response.headers["x-request-id"] == "trace-123"
        assert float(response.headers["x-process-time"]) >= 0

    async def test_request_id_generated_on_errors(self, async_client: AsyncClient):
        response = await async_client.get("/api/users/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["x-request-id"]
