"""Read-only query functions over a product sequence.

Inputs are trusted: parameters arrive already normalized by the validation
layer and are not re-checked here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from product_catalog.domain.product import (
    PageResult,
    PaginationMeta,
    Product,
    ValueRange,
)


@dataclass(frozen=True, slots=True)
class ProductStats:
    total: int
    average_price: float
    average_rating: float
    price_range: ValueRange
    rating_range: ValueRange


def search(products: Sequence[Product], term: str) -> list[Product]:
    """Case-insensitive substring match on name or description.

    An empty or whitespace-only term matches nothing.
    """
    if not term or not term.strip():
        return []

    needle = term.lower()
    return [
        product
        for product in products
        if needle in product.name.lower() or needle in product.description.lower()
    ]


def search_by_specification(products: Sequence[Product], term: str) -> list[Product]:
    """Case-insensitive substring match on any specification value."""
    if not term or not term.strip():
        return []

    needle = term.lower()
    return [
        product
        for product in products
        if any(needle in value.lower() for value in product.specs.values())
    ]


def filter_by_price_range(
    products: Sequence[Product], min_price: float, max_price: float
) -> list[Product]:
    # Inclusive on both ends
    return [product for product in products if min_price <= product.price <= max_price]


def filter_by_rating(products: Sequence[Product], min_rating: float) -> list[Product]:
    return [product for product in products if product.rating >= min_rating]


def paginate(
    products: Sequence[Product], page: int, limit: int, term: str = ""
) -> PageResult:
    """Slice a page out of the (optionally searched) products.

    Args:
        products: Products to page through, in catalog order
        page: 1-based page number
        limit: Page size
        term: Optional search term; applied before slicing when non-empty

    Returns:
        PageResult with the page slice and metadata computed over the
        filtered set
    """
    filtered = search(products, term) if term else list(products)

    start = (page - 1) * limit
    end = start + limit
    total = len(filtered)

    return PageResult(
        products=filtered[start:end],
        pagination=PaginationMeta(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if limit else 0,
            has_next=end < total,
            has_prev=page > 1,
        ),
    )


def compute_stats(products: Sequence[Product]) -> ProductStats:
    if not products:
        return ProductStats(
            total=0,
            average_price=0,
            average_rating=0,
            price_range=ValueRange(min=0, max=0),
            rating_range=ValueRange(min=0, max=0),
        )

    prices = [product.price for product in products]
    ratings = [product.rating for product in products]

    return ProductStats(
        total=len(products),
        average_price=sum(prices) / len(prices),
        average_rating=sum(ratings) / len(ratings),
        price_range=ValueRange(min=min(prices), max=max(prices)),
        rating_range=ValueRange(min=min(ratings), max=max(ratings)),
    )
