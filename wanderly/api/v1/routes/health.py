"""Health check endpoints."""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from wanderly.application.services.catalog_store import CatalogStore
from wanderly.core.dependencies import get_catalog_store

router = APIRouter()


@router.get("/health", tags=["health"])
async def simple_health_check() -> Dict[str, str]:
    """
    Simple health check for load balancer - no dependency checks.

    Returns HTTP 200 OK if the application is running.
    """
    return {"status": "ok"}


@router.get("/health/detailed", tags=["health"])
async def detailed_health_check(store: CatalogStore = Depends(get_catalog_store)) -> Dict[str, Any]:
    """
    Health check including catalog size.

    The catalog lives in memory, so an empty catalog after startup usually
    means the seed document failed to load.
    """
    attraction_count = len(store.list_attractions())
    return {
        "status": "ok" if attraction_count else "degraded",
        "catalog": {"attractions": attraction_count},
    }
