from __future__ import annotations

from dataclasses import dataclass

from product_catalog.domain.analysis import (
    NoResultsAnalysis,
    RatingAnalysis,
    analyze_rating_results,
)
from product_catalog.domain.product import Product
from product_catalog.domain.query import filter_by_rating
from product_catalog.domain.result import Err, Ok, Result
from product_catalog.domain.validation import validate_rating_params
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class FilterProductsByRatingRequest:
    """Raw minimum rating. Default: 0."""

    min_rating: float | str | None = None


@dataclass(frozen=True)
class FilterProductsByRatingResponse:
    products: list[Product]
    count: int
    min_rating: float
    analysis: RatingAnalysis | NoResultsAnalysis


class FilterProductsByRating:
    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(
        self, request: FilterProductsByRatingRequest
    ) -> Result[FilterProductsByRatingResponse]:
        min_rating = validate_rating_params(request.min_rating)
        if isinstance(min_rating, Err):
            return min_rating

        products = filter_by_rating(self._repository.get_all(), min_rating.value)

        return Ok(
            FilterProductsByRatingResponse(
                products=products,
                count=len(products),
                min_rating=min_rating.value,
                analysis=analyze_rating_results(products, min_rating.value),
            )
        )
