from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from product_catalog.domain.analysis import (
    CategorySummary,
    PriceSegment,
    RatingBucket,
    analyze_categories,
    analyze_price_segments,
    analyze_rating_distribution,
)
from product_catalog.domain.errors import InternalError
from product_catalog.domain.query import ProductStats, compute_stats
from product_catalog.domain.result import Err, Ok, Result
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProductStatsReport:
    stats: ProductStats
    categories: dict[str, CategorySummary]
    price_segments: dict[str, PriceSegment]
    rating_distribution: dict[str, RatingBucket]
    last_updated: datetime


class GetProductStats:
    """
    Aggregate statistics over the full catalog.

    Any unexpected failure while aggregating is logged and returned as a
    generic INTERNAL_ERROR; no internal detail reaches the caller.
    """

    def __init__(
        self,
        product_catalog_repository: ProductCatalogRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._repository = product_catalog_repository
        self._clock = clock

    def execute(self) -> Result[ProductStatsReport]:
        try:
            products = self._repository.get_all()
            report = ProductStatsReport(
                stats=compute_stats(products),
                categories=analyze_categories(products),
                price_segments=analyze_price_segments(products),
                rating_distribution=analyze_rating_distribution(products),
                last_updated=self._clock(),
            )
        except Exception:
            logger.exception("Failed to compute product statistics")
            return Err(InternalError("Failed to compute product statistics"))

        return Ok(report)
