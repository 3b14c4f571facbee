"""Pydantic schemas for review endpoints."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreateSchema(BaseModel):
    """Review submission. The author comes from the bearer token."""
    attraction_id: str = Field(..., min_length=1)
    rating: float = Field(..., ge=1, le=5)
    comment: str


class ReviewResponseSchema(BaseModel):
    """Review schema."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    attraction_id: str
    rating: float
    comment: str
    created_at: Optional[datetime] = None
