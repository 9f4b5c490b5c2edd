"""Feed provider API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from feedhub.api.dependencies import get_current_user, get_user_repository
from feedhub.database import get_db
from feedhub.models.feed import FeedProvider
from feedhub.models.user import User
from feedhub.schemas.feed import FeedCreate, FeedResponse
from feedhub.services.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/feeds", tags=["feeds"])


@router.get("", response_model=list[FeedResponse])
def list_feeds(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List feed providers owned by the current user plus public ones."""
    return (
        db.query(FeedProvider)
        .filter(or_(FeedProvider.owner_id == current_user.id, FeedProvider.is_public.is_(True)))
        .order_by(FeedProvider.name)
        .all()
    )


@router.post("", response_model=FeedResponse, status_code=status.HTTP_201_CREATED)
def create_feed(
    feed_data: FeedCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a feed provider. Only administrators may publish public feeds."""
    if feed_data.is_public and not users.present(current_user).is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only administrators can create public feed providers.",
        )

    feed = FeedProvider(
        owner_id=current_user.id,
        name=feed_data.name,
        url=str(feed_data.url),
        is_active=feed_data.is_active,
        is_public=feed_data.is_public,
    )
    db.add(feed)
    db.commit()
    db.refresh(feed)
    logger.info(f"User {current_user.id} created feed provider {feed.id}")
    return feed
