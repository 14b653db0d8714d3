"""Authentication service: registration, login and credential verification."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import Role, User
from app.policies.base_policy import Identity
from app.utils.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    EmailAlreadyExistsError,
    MissingTokenError,
    ValidationError,
)
from app.utils.security import hash_password, is_valid_object_id, verify_password

from .jwt_service import JWTService

logger = logging.getLogger(__name__)

SELF_REGISTRATION_ROLES = frozenset({Role.CLIENT, Role.VENDOR})


class AuthService:
    """Authentication service backed by the user table."""

    def __init__(self, db: AsyncSession, jwt_service: JWTService | None = None):
        self.db = db
        self.jwt_service = jwt_service or JWTService()

    async def register_user(
        self,
        name: str,
        email: str,
        password: str,
        role: Role = Role.CLIENT,
        phone: str | None = None,
    ) -> User:
        """Register a new client or vendor account."""

        if role not in SELF_REGISTRATION_ROLES:
            raise ValidationError(errors=["role: Only client or vendor accounts can sign up"])

        email = email.lower()
        result = await self.db.execute(select(User).where(User.email == email))
        if result.scalar_one_or_none():
            raise EmailAlreadyExistsError()

        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=role.value,
            phone=phone,
        )

        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)

        logger.info("User registered", extra={"user_id": user.id, "role": user.role})
        return user

    async def authenticate_user(self, email: str, password: str) -> User:
        """Check email and password, failing with one generic error."""

        result = await self.db.execute(select(User).where(User.email == email.lower()))
        user = result.scalar_one_or_none()

        if not user or not verify_password(password, user.password_hash):
            logger.info("Login failed", extra={"email": email})
            raise AuthenticationError("Invalid email or password")

        return user

    def issue_token(self, user: User) -> str:
        """Issue an access token for a user."""
        return self.jwt_service.create_access_token(user.id, user.role)

    async def verify_credential(self, token: str | None) -> Identity:
        """
        Resolve a raw bearer credential to an Identity.

        Raises a subclass of ``AuthenticationError`` whose ``reason`` records
        why (missing, invalid, expired, account missing). Callers at the HTTP
        boundary render every subclass identically.
        """
        if not token:
            raise MissingTokenError()

        claims = self.jwt_service.verify(token)
        user = await self.find_user(claims["subject_id"])

        if user is None:
            raise AccountNotFoundError()

        return Identity.from_user(user)

    async def find_user(self, subject_id: str) -> User | None:
        """Identity store lookup; ids of the wrong shape simply match nothing."""
        if not is_valid_object_id(subject_id):
            return None
        return await self.db.get(User, subject_id.lower())
