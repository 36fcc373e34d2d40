import logging
from typing import Awaitable, Callable

import uvicorn
from fastapi import FastAPI, Request, Response

from product_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from product_catalog.entrypoints.http.routes.health import router as health_router
from product_catalog.entrypoints.http.routes.index import DOCS_URL
from product_catalog.entrypoints.http.routes.index import router as index_router
from product_catalog.entrypoints.http.routes.products import router as products_router
from product_catalog.infra.config import (
    API_VERSION,
    api_base_url,
    is_development,
    server_host,
    server_port,
)
from product_catalog.infra.logging_config import configure_logging

logger = logging.getLogger(__name__)


async def log_request(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Development-only request log: method, path and client host."""
    logger.info(
        "%s %s",
        request.method,
        request.url.path,
        extra={"client": request.client.host if request.client else None},
    )
    return await call_next(request)


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Product Catalog API",
        description="""
        Read-only API over an in-memory product catalog.

        ## Features
        - Paginated listing with free-text search
        - Single and bulk lookup by ID
        - Price, rating and specification filters with result analysis
        - Catalog statistics

        ## Authentication
        None. The catalog is public and read-only.

        ## Error Handling
        All errors return `{"error": {"message", "code", "details"?}}`
        with a stable error code.
        """,
        version=API_VERSION,
        docs_url=DOCS_URL,  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "MIT",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    if is_development():
        app.middleware("http")(log_request)

    # Register routers
    app.include_router(index_router)
    app.include_router(health_router)
    app.include_router(products_router, prefix=api_base_url())

    return app


app = build_app()


def run() -> None:
    """Serve the API with uvicorn using HOST/PORT from the environment."""
    uvicorn.run(app, host=server_host(), port=server_port())
