import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from parts_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from parts_catalog.entrypoints.http.rate_limit import register_rate_limit
from parts_catalog.entrypoints.http.routes.health import router as health_router
from parts_catalog.entrypoints.http.routes.products import router as products_router
from parts_catalog.infra import config
from parts_catalog.infra.db.session import dispose_engine
from parts_catalog.infra.rate_limiter import FixedWindowRateLimiter


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # The engine is created lazily by the first request that needs a session
    yield
    dispose_engine()


def build_app() -> FastAPI:
    logging.getLogger("parts_catalog").setLevel(config.log_level())

    app = FastAPI(
        title="Parts Catalog API",
        description="""
        Industrial connector and cable catalog API.

        ## Features
        - List products with filters and cursor pagination
        - List available filter values
        - Get product details

        ## Authentication
        Reads are public. A valid admin session raises the page-size cap.

        ## Rate Limiting
        Each client IP gets RATE_LIMIT_PER_MINUTE requests per minute
        (default 100). Over the limit, requests get 429 with Retry-After.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
        contact={
            "name": "Parts Catalog Team",
            "email": "dev@parts-catalog.example",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Per-client request budget, counted in this process
    register_rate_limit(app, FixedWindowRateLimiter(), config.rate_limit_per_minute())

    # Register routers
    app.include_router(health_router)
    app.include_router(products_router, prefix="/v1")

    return app


app = build_app()
