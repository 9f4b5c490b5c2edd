"""Password hashing with bcrypt."""

from functools import lru_cache

from passlib.context import CryptContext

from feedhub.config import get_settings
from feedhub.exceptions import MalformedCredentialError


class PasswordHasher:
    """One-way salted password hashing and constant-time verification."""

    def __init__(self, rounds: int = 12) -> None:
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password. Every call produces a different salt."""
        _require_password(password)
        return self._context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        _require_password(password)
        if not isinstance(hashed_password, str) or not hashed_password:
            raise MalformedCredentialError("Stored password hash is empty")
        try:
            return self._context.verify(password, hashed_password)
        except (TypeError, ValueError) as e:
            raise MalformedCredentialError(f"Stored password hash is malformed: {e}") from e


def _require_password(password: str) -> None:
    if not isinstance(password, str) or not password:
        raise MalformedCredentialError("Password must be a non-empty string")


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the hasher configured from settings."""
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)
