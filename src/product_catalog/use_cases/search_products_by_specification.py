from __future__ import annotations

from dataclasses import dataclass

from product_catalog.domain.analysis import (
    NoResultsAnalysis,
    SpecificationAnalysis,
    analyze_specification_results,
)
from product_catalog.domain.product import Product
from product_catalog.domain.query import search_by_specification
from product_catalog.domain.result import Err, Ok, Result
from product_catalog.domain.validation import validate_specification_params
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class SearchProductsBySpecificationRequest:
    """Specification term (required, 1..200 chars after trimming)."""

    spec: str | None = None


@dataclass(frozen=True)
class SearchProductsBySpecificationResponse:
    products: list[Product]
    count: int
    search_term: str
    analysis: SpecificationAnalysis | NoResultsAnalysis


class SearchProductsBySpecification:
    """Search specification values, e.g. "Apple M2" or "bluetooth"."""

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(
        self, request: SearchProductsBySpecificationRequest
    ) -> Result[SearchProductsBySpecificationResponse]:
        term = validate_specification_params(request.spec)
        if isinstance(term, Err):
            return term

        products = search_by_specification(self._repository.get_all(), term.value)

        return Ok(
            SearchProductsBySpecificationResponse(
                products=products,
                count=len(products),
                search_term=term.value,
                analysis=analyze_specification_results(products, term.value),
            )
        )
