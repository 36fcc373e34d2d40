"""Test suite for GetProductStats use case."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from product_catalog.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from product_catalog.domain.result import Err, Ok
from product_catalog.infra.seed_products import SEED_PRODUCTS
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository
from product_catalog.use_cases.get_product_stats import GetProductStats, ProductStatsReport

FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def use_case() -> GetProductStats:
    return GetProductStats(
        product_catalog_repository=InMemoryProductCatalogRepository(SEED_PRODUCTS),
        clock=lambda: FIXED_NOW,
    )


def test_stats_over_seed_catalog(use_case: GetProductStats) -> None:
    result = use_case.execute()

    assert isinstance(result, Ok)
    report = result.value
    assert isinstance(report, ProductStatsReport)
    assert report.stats.total == 10
    assert report.stats.average_price == pytest.approx(749.99)
    assert report.stats.average_rating == pytest.approx(4.71)
    assert report.stats.price_range.min == 249.99
    assert report.stats.price_range.max == 1299.99
    assert report.stats.rating_range.min == 4.5
    assert report.stats.rating_range.max == 4.9
    assert report.last_updated == FIXED_NOW


def test_breakdowns_cover_whole_catalog(use_case: GetProductStats) -> None:
    report = use_case.execute().unwrap()

    assert sum(c.count for c in report.categories.values()) == 10
    assert sum(s.count for s in report.price_segments.values()) == 10
    assert report.rating_distribution["excellent"].count == 10
    assert report.rating_distribution["excellent"].percentage == pytest.approx(100.0)


def test_empty_catalog_yields_zero_stats() -> None:
    use_case = GetProductStats(
        product_catalog_repository=InMemoryProductCatalogRepository([]),
        clock=lambda: FIXED_NOW,
    )

    report = use_case.execute().unwrap()

    assert report.stats.total == 0
    assert report.stats.average_price == 0
    assert report.categories == {}
    assert all(s.count == 0 for s in report.price_segments.values())


def test_unexpected_failure_returns_internal_error(caplog: pytest.LogCaptureFixture) -> None:
    repository = Mock(spec=ProductCatalogRepository)
    repository.get_all.side_effect = RuntimeError("storage exploded")
    use_case = GetProductStats(product_catalog_repository=repository)

    with caplog.at_level(logging.ERROR):
        result = use_case.execute()

    assert isinstance(result, Err)
    assert result.code == "INTERNAL_ERROR"
    assert result.status_hint == 500
    assert result.message == "Failed to compute product statistics"
    assert "storage exploded" not in result.message
    assert "Failed to compute product statistics" in caplog.text


def test_default_clock_is_timezone_aware() -> None:
    use_case = GetProductStats(
        product_catalog_repository=InMemoryProductCatalogRepository(SEED_PRODUCTS)
    )

    report = use_case.execute().unwrap()

    assert report.last_updated.tzinfo is not None
