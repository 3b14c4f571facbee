"""Dependency injection for FastAPI routes.
Follows Dependency Inversion Principle - routes depend on abstractions."""
from fastapi import Depends, Request

from wanderly.application.services.auth_service import AuthService
from wanderly.application.services.catalog_store import CatalogStore
from wanderly.config import Settings, get_settings
from wanderly.domain.services.trip_cost import TripCostEstimator
from wanderly.infrastructure.persistence.repositories.in_memory_attraction_repository import (
    InMemoryAttractionRepository,
)
from wanderly.infrastructure.persistence.repositories.in_memory_review_repository import (
    InMemoryReviewRepository,
)
from wanderly.infrastructure.persistence.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)


def build_catalog_store() -> CatalogStore:
    """Wire an empty catalog over in-memory repositories."""
    return CatalogStore(
        attraction_repository=InMemoryAttractionRepository(),
        review_repository=InMemoryReviewRepository(),
        user_repository=InMemoryUserRepository(),
    )


def get_catalog_store(request: Request) -> CatalogStore:
    """The catalog owned by the running application (see ``create_app``)."""
    return request.app.state.catalog_store


def get_auth_service(
    store: CatalogStore = Depends(get_catalog_store),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """Get auth service bound to the application catalog."""
    return AuthService(
        store=store,
        token_secret=settings.TOKEN_SECRET,
        token_ttl_days=settings.TOKEN_TTL_DAYS,
        hash_iterations=settings.PASSWORD_HASH_ITERATIONS,
    )


def get_trip_cost_estimator(settings: Settings = Depends(get_settings)) -> TripCostEstimator:
    """Get trip cost estimator with configured per-diems."""
    return TripCostEstimator(
        accommodation_per_diem=settings.ACCOMMODATION_PER_DIEM,
        food_per_diem=settings.FOOD_PER_DIEM,
    )
