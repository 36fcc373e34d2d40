"""Business analyses derived from a product sequence.

All functions are pure and deterministic for a given input. Result analyses
short-circuit to a fixed NoResultsAnalysis on empty input, so no average or
ratio is ever computed over zero products.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Sequence, Union

from product_catalog.domain.product import Product

# (category, name keywords); first match wins
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Smartphones", ("iphone", "galaxy")),
    ("Laptops", ("macbook", "dell")),
    ("Tablets", ("ipad",)),
    ("Audio", ("airpods", "sony")),
    ("Gaming", ("nintendo", "playstation")),
    ("Wearables", ("apple watch",)),
)
DEFAULT_CATEGORY = "Other"

# (segment, lower bound inclusive, upper bound exclusive)
PRICE_SEGMENTS: tuple[tuple[str, float, float], ...] = (
    ("budget", 0, 300),
    ("midRange", 300, 800),
    ("premium", 800, 1200),
    ("luxury", 1200, math.inf),
)

# (bucket, lower bound inclusive, nominal upper bound)
RATING_BUCKETS: tuple[tuple[str, float, float], ...] = (
    ("excellent", 4.5, 5.0),
    ("good", 4.0, 4.5),
    ("average", 3.0, 4.0),
    ("poor", 0.0, 3.0),
)

TOP_RATED_LIMIT = 3
COMMON_SPECIFICATIONS_LIMIT = 5
RELATED_PRODUCTS_LIMIT = 3


@dataclass(frozen=True)
class CategorySummary:
    count: int
    average_price: float
    average_rating: float
    products: list[Product]


@dataclass(frozen=True)
class PriceSegment:
    min: float
    max: float
    count: int
    products: list[Product]


@dataclass(frozen=True, slots=True)
class RatingBucket:
    min: float
    max: float
    count: int
    percentage: float


@dataclass(frozen=True, slots=True)
class SpecificationCount:
    specification: str
    count: int


@dataclass(frozen=True)
class NoResultsAnalysis:
    message: str
    suggestions: list[str]


@dataclass(frozen=True)
class PriceRangeAnalysis:
    average_price: float
    average_rating: float
    price_range_utilization: float
    best_value: Product


@dataclass(frozen=True)
class RatingAnalysis:
    average_price: float
    average_rating: float
    rating_distribution: dict[str, RatingBucket]
    top_rated: list[Product]


@dataclass(frozen=True)
class SpecificationAnalysis:
    average_price: float
    average_rating: float
    common_specifications: list[SpecificationCount]
    related_products: list[Product]


ResultAnalysis = Union[
    PriceRangeAnalysis, RatingAnalysis, SpecificationAnalysis, NoResultsAnalysis
]


def _average(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def categorize(product: Product) -> str:
    name = product.name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def analyze_categories(products: Sequence[Product]) -> dict[str, CategorySummary]:
    grouped: dict[str, list[Product]] = {}
    for product in products:
        grouped.setdefault(categorize(product), []).append(product)

    return {
        category: CategorySummary(
            count=len(members),
            average_price=_average([p.price for p in members]),
            average_rating=_average([p.rating for p in members]),
            products=members,
        )
        for category, members in grouped.items()
    }


def analyze_price_segments(products: Sequence[Product]) -> dict[str, PriceSegment]:
    segments: dict[str, PriceSegment] = {}
    for name, lower, upper in PRICE_SEGMENTS:
        members = [p for p in products if lower <= p.price < upper]
        segments[name] = PriceSegment(
            min=lower, max=upper, count=len(members), products=members
        )
    return segments


def _rating_bucket(rating: float) -> str:
    for name, lower, _upper in RATING_BUCKETS:
        if rating >= lower:
            return name
    return RATING_BUCKETS[-1][0]


def analyze_rating_distribution(products: Sequence[Product]) -> dict[str, RatingBucket]:
    counts = Counter(_rating_bucket(p.rating) for p in products)
    total = len(products)

    return {
        name: RatingBucket(
            min=lower,
            max=upper,
            count=counts[name],
            percentage=(counts[name] / total) * 100 if total else 0.0,
        )
        for name, lower, upper in RATING_BUCKETS
    }


def _value_ratio(product: Product) -> float:
    if product.price <= 0:
        return math.inf
    return product.rating / product.price


def analyze_price_range_results(
    products: Sequence[Product], min_price: float, max_price: float
) -> PriceRangeAnalysis | NoResultsAnalysis:
    if not products:
        return NoResultsAnalysis(
            message="No products found in the requested price range",
            suggestions=[
                "Try widening the price range",
                "Check that the price values are correct",
            ],
        )

    prices = [p.price for p in products]
    requested_span = max_price - min_price
    if requested_span <= 0 or math.isinf(requested_span):
        utilization = 100.0
    else:
        utilization = ((max(prices) - min(prices)) / requested_span) * 100

    return PriceRangeAnalysis(
        average_price=_average(prices),
        average_rating=_average([p.rating for p in products]),
        price_range_utilization=utilization,
        # max() keeps the first product on ties
        best_value=max(products, key=_value_ratio),
    )


def analyze_rating_results(
    products: Sequence[Product], min_rating: float
) -> RatingAnalysis | NoResultsAnalysis:
    if not products:
        return NoResultsAnalysis(
            message=f"No products found with a rating of at least {min_rating}",
            suggestions=[
                "Try lowering the minimum rating",
                "Check that the rating is between 0 and 5",
            ],
        )

    return RatingAnalysis(
        average_price=_average([p.price for p in products]),
        average_rating=_average([p.rating for p in products]),
        rating_distribution=analyze_rating_distribution(products),
        top_rated=sorted(products, key=lambda p: p.rating, reverse=True)[:TOP_RATED_LIMIT],
    )


def analyze_specification_results(
    products: Sequence[Product], term: str
) -> SpecificationAnalysis | NoResultsAnalysis:
    if not products:
        return NoResultsAnalysis(
            message="No products found with the requested specification",
            suggestions=[
                "Try a more general term",
                "Check the spelling of the search term",
            ],
        )

    needle = term.lower()
    spec_counts: Counter[str] = Counter()
    for product in products:
        for spec_name, value in product.specs.items():
            if needle in value.lower():
                spec_counts[spec_name] += 1

    # most_common() orders ties by first occurrence
    common = [
        SpecificationCount(specification=name, count=count)
        for name, count in spec_counts.most_common(COMMON_SPECIFICATIONS_LIMIT)
    ]

    return SpecificationAnalysis(
        average_price=_average([p.price for p in products]),
        average_rating=_average([p.rating for p in products]),
        common_specifications=common,
        related_products=list(products[:RELATED_PRODUCTS_LIMIT]),
    )
