import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wanderly import __version__
from wanderly.api.v1.routes.attractions import router as attractions_router
from wanderly.api.v1.routes.auth import router as auth_router
from wanderly.api.v1.routes.dev import router as dev_router
from wanderly.api.v1.routes.health import router as health_router
from wanderly.api.v1.routes.planner import router as planner_router
from wanderly.api.v1.routes.reviews import router as reviews_router
from wanderly.api.v1.routes.users import router as users_router
from wanderly.application.services.catalog_store import CatalogStore
from wanderly.config import get_settings
from wanderly.core.dependencies import build_catalog_store
from wanderly.domain.errors import WanderlyError
from wanderly.infrastructure.persistence.seed import build_seed

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    logger.info("Starting up application...")

    if app.state.seed_on_startup:
        settings = get_settings()
        app.state.catalog_store.reseed(
            build_seed(
                settings.SEED_DATA_PATH,
                admin_username=settings.ADMIN_USERNAME,
                admin_email=settings.ADMIN_EMAIL,
                admin_password=settings.ADMIN_PASSWORD,
                hash_iterations=settings.PASSWORD_HASH_ITERATIONS,
            )
        )

    yield

    # Shutdown
    logger.info("Shutting down application...")


async def handle_domain_error(request: Request, exc: WanderlyError) -> JSONResponse:
    """Render a domain failure as ``{"detail": message}`` with its status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(catalog_store: Optional[CatalogStore] = None, seed_on_startup: bool = True) -> FastAPI:
    """Create FastAPI application and include routers.

    Args:
        catalog_store: Catalog to serve; a fresh in-memory one if omitted
        seed_on_startup: Load the seed document into the catalog at startup
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Wanderly Backend",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.catalog_store = catalog_store if catalog_store is not None else build_catalog_store()
    app.state.seed_on_startup = seed_on_startup

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(WanderlyError, handle_domain_error)

    prefix = settings.API_V1_PREFIX
    app.include_router(auth_router, prefix=prefix)
    app.include_router(attractions_router, prefix=prefix)
    app.include_router(reviews_router, prefix=prefix)
    app.include_router(users_router, prefix=prefix)
    app.include_router(planner_router, prefix=prefix)
    app.include_router(dev_router, prefix=prefix)
    app.include_router(health_router, prefix=prefix)
    return app


app = create_app()


if __name__ == "__main__":
    import os

    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
