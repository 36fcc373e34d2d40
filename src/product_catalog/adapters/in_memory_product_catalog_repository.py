from __future__ import annotations

import re
from typing import Iterable, Sequence

from product_catalog.domain.errors import ConflictError
from product_catalog.domain.product import Product
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository

_ID_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _normalize_id(product_id: int | str) -> int | None:
    if isinstance(product_id, bool):
        return None
    if isinstance(product_id, int):
        return product_id
    text = str(product_id).strip()
    if not _ID_PATTERN.fullmatch(text):
        return None
    return int(text)


class InMemoryProductCatalogRepository(ProductCatalogRepository):
    """
    Immutable in-memory catalog.

    - Stores products in insertion order
    - Rejects duplicate ids at construction
    - Never mutated afterwards, so concurrent reads need no locking
    """

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[int, Product] = {}

        for product in self._products:
            if product.id in self._by_id:
                raise ConflictError(
                    f"Duplicate product id {product.id} in catalog",
                    code="DUPLICATE_PRODUCT_ID",
                    product_id=product.id,
                )
            self._by_id[product.id] = product

    def get_all(self) -> list[Product]:
        return list(self._products)

    def get_by_id(self, product_id: int | str) -> Product | None:
        normalized = _normalize_id(product_id)
        if normalized is None:
            return None
        return self._by_id.get(normalized)

    def get_by_ids(self, product_ids: Sequence[int | str]) -> list[Product]:
        wanted = {_normalize_id(product_id) for product_id in product_ids}
        return [product for product in self._products if product.id in wanted]
