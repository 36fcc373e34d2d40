"""Get product by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from product_catalog.domain.errors import NotFoundError
from product_catalog.domain.product import Product
from product_catalog.domain.result import Err, Ok, Result
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class GetProductByIdRequest:
    """Request to get a product by ID (int or numeric text)."""

    product_id: int | str


@dataclass(frozen=True)
class GetProductByIdResponse:
    """Response containing the requested product."""

    product: Product
    found: bool = True


class GetProductById:
    """
    Use case for retrieving a single product by ID.

    Responsibilities:
    - Delegate to repository for data access (non-numeric ids match nothing)
    - Return a PRODUCT_NOT_FOUND error if the product doesn't exist
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            product_catalog_repository: Repository for catalog access
        """
        self._repository = product_catalog_repository

    def execute(self, request: GetProductByIdRequest) -> Result[GetProductByIdResponse]:
        """
        Execute the get product by ID use case.

        Args:
            request: Request containing product_id

        Returns:
            Ok(GetProductByIdResponse) or Err(NotFoundError)
        """
        product = self._repository.get_by_id(request.product_id)

        if product is None:
            return Err(
                NotFoundError(
                    resource="Product",
                    identifier=str(request.product_id),
                    code="PRODUCT_NOT_FOUND",
                    message=f"Product with ID {request.product_id} not found",
                )
            )

        return Ok(GetProductByIdResponse(product=product))
