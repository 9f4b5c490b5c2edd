"""User model."""

from sqlalchemy import Column, String

from feedhub.database import Base
from feedhub.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and feed ownership."""

    __tablename__ = "users"

    id = Column(String(32), primary_key=True)  # uuid4 hex, assigned by UserRepository
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
