"""Pydantic schemas for request/response models."""

from .auth import *
from .common import *
from .service import *
from .user import *

__all__ = [
    # Common
    "BaseResponse",
    "ErrorResponse",
    # Auth
    "SignupRequest",
    "LoginRequest",
    "AuthResponse",
    # User
    "UserResponse",
    "UserDetailResponse",
    "CurrentUserResponse",
    "ProfileUpdate",
    # Service
    "ServiceRecord",
    "ServiceUpdate",
    "ServiceResponse",
    "ServiceDetailResponse",
    "ServiceListResponse",
]
