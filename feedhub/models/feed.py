"""Feed provider model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from feedhub.database import Base
from feedhub.models.mixins import TimestampMixin


class FeedProvider(Base, TimestampMixin):
    """An RSS feed provider registered by a user."""

    __tablename__ = "feed_providers"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    url = Column(String(2048), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    is_public = Column(Boolean, nullable=False, default=False)  # admin only

    # Relationships
    owner = relationship("User", backref="feed_providers")
