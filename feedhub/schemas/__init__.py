"""Pydantic schemas for API requests and responses."""

from feedhub.schemas.auth import AuthResponse, PresentableUser, UserLogin, UserRegister, UserUpdate
from feedhub.schemas.errors import ErrorResponse
from feedhub.schemas.feed import FeedCreate, FeedResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "PresentableUser",
    "AuthResponse",
    "FeedCreate",
    "FeedResponse",
    "ErrorResponse",
]
