from __future__ import annotations

from dataclasses import dataclass

from product_catalog.domain.analysis import (
    NoResultsAnalysis,
    PriceRangeAnalysis,
    analyze_price_range_results,
)
from product_catalog.domain.product import PriceRange, Product
from product_catalog.domain.query import filter_by_price_range
from product_catalog.domain.result import Err, Ok, Result
from product_catalog.domain.validation import validate_price_params
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class FilterProductsByPriceRequest:
    """Raw price bounds. Defaults: min_price=0, max_price=unbounded."""

    min_price: float | str | None = None
    max_price: float | str | None = None


@dataclass(frozen=True)
class FilterProductsByPriceResponse:
    products: list[Product]
    count: int
    price_range: PriceRange
    analysis: PriceRangeAnalysis | NoResultsAnalysis


class FilterProductsByPrice:
    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(
        self, request: FilterProductsByPriceRequest
    ) -> Result[FilterProductsByPriceResponse]:
        price_range = validate_price_params(request.min_price, request.max_price)
        if isinstance(price_range, Err):
            return price_range

        bounds = price_range.value
        products = filter_by_price_range(self._repository.get_all(), bounds.min, bounds.max)

        return Ok(
            FilterProductsByPriceResponse(
                products=products,
                count=len(products),
                price_range=bounds,
                analysis=analyze_price_range_results(products, bounds.min, bounds.max),
            )
        )
