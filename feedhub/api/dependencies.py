"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from feedhub.config import Settings, get_settings
from feedhub.database import get_db
from feedhub.models.user import User
from feedhub.services.auth import decode_access_token
from feedhub.services.hashing import get_password_hasher
from feedhub.services.user_repository import UserRepository

security = HTTPBearer()


def get_user_repository(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UserRepository:
    """Get user repository with dependencies."""
    return UserRepository(db, hasher=get_password_hasher(), admin_email=settings.admin_email)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> User:
    """Get the current authenticated user from JWT token."""
    payload = decode_access_token(credentials.credentials)

    if payload is None or payload.get("sub") is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = users.find_by_id(payload["sub"])
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user
