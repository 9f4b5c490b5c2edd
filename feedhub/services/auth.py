"""Authentication service for JWT handling and credential checks."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from feedhub.config import get_settings
from feedhub.exceptions import MalformedCredentialError
from feedhub.models.user import User
from feedhub.services.user_repository import UserRepository

logger = logging.getLogger(__name__)


def create_access_token(user_id: str, email: str) -> str:
    """Create a JWT access token."""
    settings = get_settings()
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": user_id,
        "email": email,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def authenticate_user(users: UserRepository, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = users.find_by_email(email)
    if not user:
        return None
    try:
        if not users.hasher.verify(password, user.password_hash):
            return None
    except MalformedCredentialError as e:
        logger.warning(f"Rejected login for user {user.id}: {e}")
        return None
    return user
