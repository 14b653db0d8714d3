"""User schemas."""

from pydantic import BaseModel, Field, field_validator

from app.models.user import Role
from app.utils.validators import validate_phone_number

from .common import BaseResponse, TimestampMixin


class UserResponse(TimestampMixin):
    """Schema for user response."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    email: str
    role: Role
    phone: str | None = None


class UserDetailResponse(BaseResponse):
    """Schema for user detail response."""

    user: UserResponse


class CurrentUserResponse(BaseResponse):
    """The caller's resolved identity."""

    id: str
    role: Role
    name: str
    email: str


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile."""

    model_config = {"str_strip_whitespace": True}

    name: str | None = Field(None, min_length=1, max_length=100)
    phone: str | None = Field(None, max_length=20)

    @field_validator("phone")
    @classmethod
    def validate_phone_format(cls, v):
        if v:
            validate_phone_number(v)
        return v
