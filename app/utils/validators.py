"""Validation utilities.

Validators here raise ``ValueError`` so they can be used directly inside
pydantic field validators; pydantic turns them into field-level messages.
"""

import math
import re

from app.config.settings import settings

PHONE_PATTERN = re.compile(r"^\+?[0-9][0-9\s\-()]{6,18}$")


def validate_password(password: str) -> str:
    """Validate password length."""
    if len(password) < settings.PASSWORD_MIN_LENGTH:
        raise ValueError(
            f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters long"
        )
    if len(password.encode("utf-8")) > 72:
        raise ValueError("Password must be at most 72 bytes long")
    return password


def validate_phone_number(phone: str) -> str:
    """Validate phone number format."""
    if not PHONE_PATTERN.match(phone):
        raise ValueError("Invalid phone number format")
    return phone


def validate_price(price: float) -> float:
    """Price must be non-negative with at most two decimal places."""
    if not math.isfinite(price):
        raise ValueError("Price must be a finite number")
    if price < 0:
        raise ValueError("Price cannot be negative")
    if round(price, 2) != price:
        raise ValueError("Price can have maximum 2 decimal places")
    return price


def validate_duration(duration: int) -> int:
    """Duration is a whole number of minutes, at least ten."""
    if duration < 10:
        raise ValueError("Duration must be at least 10 minutes")
    return duration
