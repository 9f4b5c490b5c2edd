"""SQLAlchemy models."""

from feedhub.models.feed import FeedProvider
from feedhub.models.user import User

__all__ = [
    "User",
    "FeedProvider",
]
