"""Review endpoints."""
from typing import List

from fastapi import APIRouter, Depends, status

from wanderly.api.dependencies import get_current_principal
from wanderly.api.v1.schemas.review_schemas import ReviewCreateSchema, ReviewResponseSchema
from wanderly.application.services.catalog_store import CatalogStore
from wanderly.core.dependencies import get_catalog_store
from wanderly.core.security import Principal

router = APIRouter(tags=["reviews"])


@router.get("/reviews/{attraction_id}", response_model=List[ReviewResponseSchema])
async def list_reviews(attraction_id: str, store: CatalogStore = Depends(get_catalog_store)):
    """Reviews for an attraction."""
    return store.reviews_by_attraction(attraction_id)


@router.post("/reviews", response_model=ReviewResponseSchema, status_code=status.HTTP_201_CREATED)
async def create_review(
    payload: ReviewCreateSchema,
    principal: Principal = Depends(get_current_principal),
    store: CatalogStore = Depends(get_catalog_store),
):
    """Submit a review as the authenticated user."""
    return store.create_review(
        user_id=principal.user_id,
        attraction_id=payload.attraction_id,
        rating=payload.rating,
        comment=payload.comment,
    )
