"""Developer-only endpoints."""
import logging

from fastapi import APIRouter, Depends

from wanderly.api.dependencies import require_development
from wanderly.api.v1.schemas.attraction_schemas import MessageSchema
from wanderly.application.services.catalog_store import CatalogStore
from wanderly.config import Settings, get_settings
from wanderly.core.dependencies import get_catalog_store
from wanderly.infrastructure.persistence.seed import build_seed

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dev", tags=["dev"])


@router.post("/reseed", response_model=MessageSchema, dependencies=[Depends(require_development)])
def reseed(
    store: CatalogStore = Depends(get_catalog_store),
    settings: Settings = Depends(get_settings),
):
    """Clear the in-memory catalog and load the seed data again."""
    logger.info("Reseeding catalog on developer request")
    store.reseed(
        build_seed(
            settings.SEED_DATA_PATH,
            admin_username=settings.ADMIN_USERNAME,
            admin_email=settings.ADMIN_EMAIL,
            admin_password=settings.ADMIN_PASSWORD,
            hash_iterations=settings.PASSWORD_HASH_ITERATIONS,
        )
    )
    return MessageSchema(message="Reseeded in-memory data")
