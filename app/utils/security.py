"""Security utilities for password hashing and identifier generation."""

import re
import secrets

from passlib.context import CryptContext

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def generate_object_id() -> str:
    """Generate a 24-character hex identifier."""
    return secrets.token_hex(12)


def is_valid_object_id(value: object) -> bool:
    """Check that a value matches the store's identifier format."""
    return isinstance(value, str) and OBJECT_ID_PATTERN.fullmatch(value) is not None

