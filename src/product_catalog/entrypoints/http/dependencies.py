"""
Dependency injection for FastAPI routes.

Key principle: the catalog repository is immutable, so one instance is
shared by the whole process (lru_cache). Use cases are cheap and built
per request.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from product_catalog.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from product_catalog.infra.seed_products import SEED_PRODUCTS
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository
from product_catalog.use_cases.filter_products_by_price import FilterProductsByPrice
from product_catalog.use_cases.filter_products_by_rating import FilterProductsByRating
from product_catalog.use_cases.get_product_by_id import GetProductById
from product_catalog.use_cases.get_product_stats import GetProductStats
from product_catalog.use_cases.get_products_by_ids import GetProductsByIds
from product_catalog.use_cases.list_products import ListProducts
from product_catalog.use_cases.search_products_by_specification import (
    SearchProductsBySpecification,
)


@lru_cache
def get_product_catalog_repository() -> ProductCatalogRepository:
    """
    Provides the process-wide catalog, built once from the static seed.

    Returns:
        ProductCatalogRepository: Shared read-only repository
    """
    return InMemoryProductCatalogRepository(SEED_PRODUCTS)


def get_list_products_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> ListProducts:
    return ListProducts(product_catalog_repository=repository)


def get_get_product_by_id_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> GetProductById:
    return GetProductById(product_catalog_repository=repository)


def get_get_products_by_ids_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> GetProductsByIds:
    return GetProductsByIds(product_catalog_repository=repository)


def get_product_stats_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> GetProductStats:
    return GetProductStats(product_catalog_repository=repository)


def get_filter_by_price_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> FilterProductsByPrice:
    return FilterProductsByPrice(product_catalog_repository=repository)


def get_filter_by_rating_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> FilterProductsByRating:
    return FilterProductsByRating(product_catalog_repository=repository)


def get_search_by_specification_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> SearchProductsBySpecification:
    return SearchProductsBySpecification(product_catalog_repository=repository)
