import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from storefront_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from storefront_catalog.entrypoints.http.routes.cart import router as cart_router
from storefront_catalog.entrypoints.http.routes.catalogs import router as catalogs_router
from storefront_catalog.entrypoints.http.routes.health import router as health_router
from storefront_catalog.infra.db.session import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    dispose_engine()
    logger.info("Database engine disposed")


def build_app() -> FastAPI:
    app = FastAPI(
        title="Storefront Catalog API",
        description="""
        Storefront catalog API for browsing digital and physical products.

        ## Features
        - Filter catalogs by text, category, price ceiling and rating
        - Sort by recency, price, rating, popularity or name
        - Page-control labels computed server-side
        - Session carts

        ## Sessions
        Carts are keyed by the X-Session-Id header (default: anonymous).

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(catalogs_router, prefix="/v1")
    app.include_router(cart_router, prefix="/v1")

    return app


app = build_app()
