"""Authentication and user schemas."""

from pydantic import BaseModel, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)


class UserUpdate(BaseModel):
    """Replace the current user's profile. Password is only changed when given."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str | None = Field(None, min_length=6, max_length=128)


class PresentableUser(BaseModel):
    """User view that is safe to send to clients."""

    id: str
    email: str
    name: str
    is_admin: bool = False


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    token: str
    token_type: str = "bearer"  # noqa: S105
    user: PresentableUser
