from typing import Any

from fastapi import APIRouter

from product_catalog.infra.config import API_VERSION, api_base_url, app_env

router = APIRouter(tags=["General"])

DOCS_URL = "/docs"

FEATURES = [
    "Paginated product listing",
    "Product search",
    "Bulk lookup by ID",
    "Product statistics",
    "Price and rating filters",
    "Specification search",
    "Interactive OpenAPI documentation",
]


@router.get("/", summary="API information")
def index() -> dict[str, Any]:
    """Welcome payload describing the API and where to find things."""
    return {
        "message": "Welcome to the Product Catalog API",
        "version": API_VERSION,
        "environment": app_env(),
        "documentation": DOCS_URL,
        "endpoints": {
            "products": f"{api_base_url()}/products",
            "docs": DOCS_URL,
        },
        "features": FEATURES,
    }
