from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from product_catalog.domain.product import Product


class ProductCatalogRepository(ABC):
    """
    Port for read-only catalog access.

    Contract:
        - get_all returns products in the same order on every call
        - ids may arrive as int or text; implementations normalize to int
        - a non-numeric id never raises, it simply matches nothing
    """

    @abstractmethod
    def get_all(self) -> list[Product]: ...

    @abstractmethod
    def get_by_id(self, product_id: int | str) -> Product | None:
        """
        Get a single product.

        Args:
            product_id: Product id as int or numeric text

        Returns:
            Product if found, None otherwise (including non-numeric ids)
        """
        ...

    @abstractmethod
    def get_by_ids(self, product_ids: Sequence[int | str]) -> list[Product]:
        """
        Get every product whose id is in product_ids.

        Returned products keep catalog order, not request order.
        Unmatched ids are silently omitted.
        """
        ...
