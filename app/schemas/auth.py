"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.user import Role
from app.utils.validators import validate_password, validate_phone_number

from .common import BaseResponse
from .user import UserResponse


class SignupRequest(BaseModel):
    """Self-registration request."""

    model_config = {"str_strip_whitespace": True}

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")
    phone: str | None = Field(None, description="Phone number")
    role: Role = Field(default=Role.CLIENT, description="client or vendor")

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v):
        return validate_password(v)

    @field_validator("phone")
    @classmethod
    def validate_phone_format(cls, v):
        if v:
            validate_phone_number(v)
        return v


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class AuthResponse(BaseResponse):
    """Token issued on signup or login."""

    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="Bearer", description="Token type")
    expires_in: int = Field(..., description="Access token expiration in seconds")
    user: UserResponse
