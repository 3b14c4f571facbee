"""User reviews and favorites endpoints."""
from typing import List

from fastapi import APIRouter, Depends

from wanderly.api.dependencies import ensure_same_user, get_current_principal
from wanderly.api.v1.schemas.attraction_schemas import AttractionResponseSchema
from wanderly.api.v1.schemas.review_schemas import ReviewResponseSchema
from wanderly.api.v1.schemas.user_schemas import FavoriteAddSchema, FavoritesResponseSchema
from wanderly.application.services.catalog_store import CatalogStore
from wanderly.core.dependencies import get_catalog_store
from wanderly.core.security import Principal

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}/reviews", response_model=List[ReviewResponseSchema])
async def list_user_reviews(user_id: str, store: CatalogStore = Depends(get_catalog_store)):
    """Reviews written by a user."""
    return store.reviews_by_user(user_id)


@router.get("/{user_id}/favorites", response_model=List[AttractionResponseSchema])
async def list_favorites(
    user_id: str,
    principal: Principal = Depends(get_current_principal),
    store: CatalogStore = Depends(get_catalog_store),
):
    """Favorite attractions of a user. Deleted attractions are skipped."""
    return store.favorites_for(user_id)


@router.post("/{user_id}/favorites", response_model=FavoritesResponseSchema)
async def add_favorite(
    user_id: str,
    payload: FavoriteAddSchema,
    principal: Principal = Depends(get_current_principal),
    store: CatalogStore = Depends(get_catalog_store),
):
    """Bookmark an attraction for the authenticated user."""
    ensure_same_user(principal, user_id)
    return FavoritesResponseSchema(favorites=store.add_favorite(user_id, payload.attraction_id))


@router.delete("/{user_id}/favorites/{attraction_id}", response_model=FavoritesResponseSchema)
async def remove_favorite(
    user_id: str,
    attraction_id: str,
    principal: Principal = Depends(get_current_principal),
    store: CatalogStore = Depends(get_catalog_store),
):
    """Remove a bookmark for the authenticated user."""
    ensure_same_user(principal, user_id)
    return FavoritesResponseSchema(favorites=store.remove_favorite(user_id, attraction_id))
