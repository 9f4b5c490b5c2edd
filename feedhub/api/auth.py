"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from feedhub.api.dependencies import get_current_user, get_user_repository
from feedhub.models.user import User
from feedhub.schemas.auth import AuthResponse, PresentableUser, UserLogin, UserRegister, UserUpdate
from feedhub.services.auth import authenticate_user, create_access_token
from feedhub.services.user_repository import UserRepository

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    users: Annotated[UserRepository, Depends(get_user_repository)],
):
    """Register a new user. Duplicate emails are rejected by the repository."""
    user = users.create(user_data.name, user_data.email, user_data.password)

    return AuthResponse(
        token=create_access_token(user.id, user.email),
        user=users.present(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    users: Annotated[UserRepository, Depends(get_user_repository)],
):
    """Login with email and password."""
    user = authenticate_user(users, credentials.email, credentials.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return AuthResponse(
        token=create_access_token(user.id, user.email),
        user=users.present(user),
    )


@router.get("/me", response_model=PresentableUser)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
):
    """Get current user information."""
    return users.present(current_user)


@router.put("/me", response_model=PresentableUser)
def update_me(
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
):
    """Replace the current user's name and email, and optionally the password."""
    current_user.name = user_data.name
    current_user.email = user_data.email
    if user_data.password:
        user = users.set_password(current_user, user_data.password)
    else:
        user = users.update(current_user)
    return users.present(user)
