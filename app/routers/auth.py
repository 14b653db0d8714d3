"""Authentication routes."""

from fastapi import APIRouter, Depends, status

from app.dependencies.services import get_auth_service
from app.schemas.auth import AuthResponse, LoginRequest, SignupRequest
from app.schemas.user import UserResponse
from app.services.auth_service import AuthService

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    signup_request: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Register a client or vendor account and return an access token."""

    user = await auth_service.register_user(
        name=signup_request.name,
        email=signup_request.email,
        password=signup_request.password,
        role=signup_request.role,
        phone=signup_request.phone,
    )

    return AuthResponse(
        success=True,
        message="Registration successful",
        token=auth_service.issue_token(user),
        expires_in=auth_service.jwt_service.expires_in,
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    login_request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Exchange email and password for an access token."""

    user = await auth_service.authenticate_user(login_request.email, login_request.password)

    return AuthResponse(
        success=True,
        message="Login successful",
        token=auth_service.issue_token(user),
        expires_in=auth_service.jwt_service.expires_in,
        user=UserResponse.model_validate(user),
    )
