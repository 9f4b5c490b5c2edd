"""User persistence and presentation."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from feedhub.exceptions import DuplicateEmailError, UserNotFoundError
from feedhub.models.user import User
from feedhub.schemas.auth import PresentableUser
from feedhub.services.hashing import PasswordHasher, get_password_hasher

logger = logging.getLogger(__name__)


def present_user(user: User, admin_email: str | None) -> PresentableUser:
    """Build the client-facing view of a user. Never includes the password hash."""
    return PresentableUser(
        id=user.id,
        email=user.email,
        name=user.name,
        is_admin=admin_email is not None and user.email == admin_email,
    )


class UserRepository:
    """Owns every write to the users table.

    Email uniqueness is checked before updates so callers get a
    DuplicateEmailError instead of a storage error. The unique index on
    users.email still catches concurrent writers; those violations are
    translated to the same error.
    """

    def __init__(
        self,
        db: Session,
        hasher: PasswordHasher | None = None,
        admin_email: str | None = None,
    ):
        self.db = db
        self.hasher = hasher or get_password_hasher()
        self.admin_email = admin_email

    def create(self, name: str, email: str, password: str) -> User:
        """Hash the password and persist a new user."""
        now = datetime.now(UTC)
        user = User(
            id=uuid4().hex,
            name=name,
            email=email,
            password_hash=self.hasher.hash(password),
            created_at=now,
            updated_at=now,
        )
        self.db.add(user)
        self._commit(email)
        self.db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: str) -> User | None:
        """Get a user by id."""
        return self.db.query(User).filter(User.id == user_id).first()

    def update(self, user: User) -> User:
        """Replace the stored record with `user` (last write wins).

        `created_at` is kept from the stored record and `updated_at` is
        refreshed. Nothing is written when another user owns the email.
        """
        # Read before any rollback expires the instance
        email = user.email
        with self.db.no_autoflush:
            existing = self.db.get(User, user.id)
            if existing is None:
                raise UserNotFoundError(user.id)
            created_at = existing.created_at
            taken = self._email_taken(email, user.id)
        if taken:
            self.db.rollback()
            raise DuplicateEmailError(email)

        stored = self.db.merge(user)
        stored.created_at = created_at
        stored.updated_at = datetime.now(UTC)
        self._commit(email)
        self.db.refresh(stored)
        logger.info(f"Updated user {stored.id}")
        return stored

    def set_password(self, user: User, password: str) -> User:
        """Store a new password hash for the user."""
        user.password_hash = self.hasher.hash(password)
        return self.update(user)

    def present(self, user: User) -> PresentableUser:
        """Build the client-facing view of a user."""
        return present_user(user, self.admin_email)

    def _commit(self, email: str) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Unique constraint rejected email {email}")
            raise DuplicateEmailError(email) from None

    def _email_taken(self, email: str, user_id: str) -> bool:
        return (
            self.db.query(User.id).filter(User.email == email, User.id != user_id).first()
            is not None
        )
