from __future__ import annotations

from dataclasses import dataclass

from product_catalog.domain.product import PaginationMeta, Product
from product_catalog.domain.query import paginate
from product_catalog.domain.result import Err, Ok, Result
from product_catalog.domain.validation import (
    validate_pagination_params,
    validate_search_params,
)
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class ListProductsRequest:
    """Raw listing parameters.

    Defaults (applied by validation): page=1, limit=10, query="" (no search).
    """

    page: int | str | None = None
    limit: int | str | None = None
    query: str | None = None


@dataclass(frozen=True)
class ListProductsResponse:
    products: list[Product]
    pagination: PaginationMeta
    search_term: str


class ListProducts:
    """
    Paginated product listing with optional free-text search.

    Validation happens here; the query engine trusts its inputs.
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, request: ListProductsRequest) -> Result[ListProductsResponse]:
        paging = validate_pagination_params(request.page, request.limit)
        if isinstance(paging, Err):
            return paging

        search_term = validate_search_params(request.query)
        if isinstance(search_term, Err):
            return search_term

        page = paginate(
            self._repository.get_all(),
            page=paging.value.page,
            limit=paging.value.limit,
            term=search_term.value,
        )

        return Ok(
            ListProductsResponse(
                products=page.products,
                pagination=page.pagination,
                search_term=search_term.value,
            )
        )
