# app/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi_pagination import add_pagination

from app.api.v1.endpoints import cart, catalog, content
from app.controllers.catalog_store import CatalogStore
from app.core.config import settings
from app.services.cart.codec import cart_codec
from app.services.demo_data import seed_demo_catalog

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Seeds the demo catalog on startup when enabled and the store is empty.
    """
    log.info("Application starting up...")
    if settings.SEED_DEMO_DATA:
        seed_demo_catalog(app.state.store)
    yield
    log.info("Application shutting down.")


def create_app(store: Optional[CatalogStore] = None) -> FastAPI:
    """
    Builds the application around one explicitly constructed store. The
    store lives on app.state and is handed to endpoints by dependency.
    """
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Catalog, content pages, site settings and a cookie-held cart.",
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.store = store or CatalogStore(store_name=settings.STORE_NAME)
    app.state.cart_codec = cart_codec

    # Create a master API router that will group all other routers
    api_router = APIRouter(prefix="/api/v1")
    api_router.include_router(catalog.router, tags=["Catalog"])
    api_router.include_router(content.router, tags=["Content"])
    api_router.include_router(cart.router, tags=["Cart"])
    app.include_router(api_router)

    add_pagination(app)

    # Root endpoint for a simple health check
    @app.get("/", tags=["Health"])
    async def read_root():
        return {"message": f"{settings.PROJECT_NAME} is up and running!"}

    return app


app = create_app()
