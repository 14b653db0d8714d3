"""User profile routes."""

from fastapi import APIRouter, Depends

from app.dependencies.auth import get_current_identity
from app.dependencies.services import get_user_service
from app.policies.base_policy import Identity
from app.schemas.user import CurrentUserResponse, ProfileUpdate, UserDetailResponse, UserResponse
from app.services.user_service import UserService

router = APIRouter()


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(
    identity: Identity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
):
    """Quick check of who the token belongs to."""

    user = await user_service.get_user_by_id(identity.id)

    return CurrentUserResponse(
        success=True,
        message="Authenticated",
        id=identity.id,
        role=identity.role,
        name=user.name,
        email=user.email,
    )


@router.get("/profile", response_model=UserDetailResponse)
async def get_profile(
    identity: Identity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
):
    """Get current user profile."""

    user = await user_service.get_user_by_id(identity.id)

    return UserDetailResponse(
        success=True,
        message="User profile retrieved successfully",
        user=UserResponse.model_validate(user),
    )


@router.put("/profile", response_model=UserDetailResponse)
async def update_profile(
    profile_update: ProfileUpdate,
    identity: Identity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
):
    """Update current user profile."""

    user = await user_service.update_profile(
        identity.id, **profile_update.model_dump(exclude_unset=True)
    )

    return UserDetailResponse(
        success=True,
        message="Profile updated successfully",
        user=UserResponse.model_validate(user),
    )
