from __future__ import annotations

from dataclasses import dataclass

from product_catalog.domain.errors import NotFoundError
from product_catalog.domain.product import Product
from product_catalog.domain.result import Err, Ok, Result
from product_catalog.domain.validation import validate_ids_params
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class GetProductsByIdsRequest:
    """Comma-separated product ids, e.g. "1,2,3" (max 20)."""

    ids: str | None = None


@dataclass(frozen=True)
class GetProductsByIdsResponse:
    products: list[Product]
    count: int
    requested_ids: list[int]
    found_ids: list[int]


class GetProductsByIds:
    """
    Bulk lookup by id.

    Every requested id must exist; otherwise the whole lookup fails with
    PRODUCTS_NOT_FOUND naming the missing ids. Products come back in catalog
    order, not request order.
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, request: GetProductsByIdsRequest) -> Result[GetProductsByIdsResponse]:
        ids = validate_ids_params(request.ids)
        if isinstance(ids, Err):
            return ids

        requested_ids = ids.value
        products = self._repository.get_by_ids(requested_ids)
        found_ids = [product.id for product in products]

        missing_ids = [product_id for product_id in requested_ids if product_id not in found_ids]
        if missing_ids:
            return Err(
                NotFoundError(
                    resource="Products",
                    identifier=",".join(str(product_id) for product_id in missing_ids),
                    code="PRODUCTS_NOT_FOUND",
                    message="The following products were not found: "
                    + ", ".join(str(product_id) for product_id in missing_ids),
                    missing_ids=missing_ids,
                )
            )

        return Ok(
            GetProductsByIdsResponse(
                products=products,
                count=len(products),
                requested_ids=requested_ids,
                found_ids=found_ids,
            )
        )
