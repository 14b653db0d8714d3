"""JWT service for token generation and validation."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from jwt.exceptions import ExpiredSignatureError, PyJWTError

from app.config.settings import settings
from app.models.user import Role
from app.utils.exceptions import InvalidTokenError, TokenExpiredError


class JWTService:
    """Service for JWT token operations."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        access_token_expire_minutes: Optional[int] = None,
    ):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.access_token_expire_minutes = (
            access_token_expire_minutes
            if access_token_expire_minutes is not None
            else settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
        )
        self.issuer = settings.JWT_ISSUER
        self.audience = settings.JWT_AUDIENCE

    @property
    def expires_in(self) -> int:
        """Access token lifetime in seconds."""
        return self.access_token_expire_minutes * 60

    def create_access_token(
        self,
        user_id: str,
        role: Role | str,
    ) -> str:
        """Create a JWT access token."""
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=self.access_token_expire_minutes)

        payload = {
            "sub": str(user_id),  # Subject (user ID)
            "role": Role(role).value,
            "type": "access",
            "iat": now,
            "exp": expire,
            "iss": self.issuer,
            "aud": self.audience,
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """Decode and validate a JWT token."""
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
                options={"require": ["exp", "sub"]},
            )

        except ExpiredSignatureError:
            raise TokenExpiredError("Token has expired")

        except PyJWTError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

    def decode_access_token(self, token: str) -> Dict[str, Any]:
        """Decode and validate an access token."""
        payload = self.decode_token(token)

        if payload.get("type") != "access":
            raise InvalidTokenError("Invalid token type")

        return payload

    def verify(self, token: str) -> Dict[str, Any]:
        """Verify an access token and return ``{subject_id, expiry}``."""
        payload = self.decode_access_token(token)
        subject_id = payload.get("sub")

        if not subject_id:
            raise InvalidTokenError("Token missing subject")

        return {
            "subject_id": str(subject_id),
            "expiry": datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        }
