"""Feed provider schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class FeedCreate(BaseModel):
    """Create a feed provider."""

    name: str = Field(..., min_length=1, max_length=255)
    url: HttpUrl
    is_active: bool = True
    is_public: bool = False


class FeedResponse(BaseModel):
    """Feed provider response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: str
    name: str
    url: str
    is_active: bool
    is_public: bool
    created_at: datetime
    updated_at: datetime
