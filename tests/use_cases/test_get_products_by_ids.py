"""Test suite for GetProductsByIds use case."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from product_catalog.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from product_catalog.domain.result import Err, Ok
from product_catalog.infra.seed_products import SEED_PRODUCTS
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository
from product_catalog.use_cases.get_products_by_ids import (
    GetProductsByIds,
    GetProductsByIdsRequest,
)


@pytest.fixture()
def use_case() -> GetProductsByIds:
    return GetProductsByIds(
        product_catalog_repository=InMemoryProductCatalogRepository(SEED_PRODUCTS)
    )


def test_returns_products_in_catalog_order(use_case: GetProductsByIds) -> None:
    result = use_case.execute(GetProductsByIdsRequest(ids="5,1,3"))

    assert isinstance(result, Ok)
    assert [p.id for p in result.value.products] == [1, 3, 5]
    assert result.value.count == 3
    assert result.value.requested_ids == [5, 1, 3]
    assert result.value.found_ids == [1, 3, 5]


def test_duplicate_requested_ids_succeed(use_case: GetProductsByIds) -> None:
    result = use_case.execute(GetProductsByIdsRequest(ids="2,2"))

    assert isinstance(result, Ok)
    assert [p.id for p in result.value.products] == [2]
    assert result.value.count == 1


def test_missing_ids_fail_whole_lookup(use_case: GetProductsByIds) -> None:
    result = use_case.execute(GetProductsByIdsRequest(ids="1,11,12"))

    assert isinstance(result, Err)
    assert result.code == "PRODUCTS_NOT_FOUND"
    assert result.status_hint == 404
    assert result.message == "The following products were not found: 11, 12"
    assert result.error.context["missing_ids"] == [11, 12]


@pytest.mark.parametrize(
    ("ids", "code"),
    [
        (None, "MISSING_IDS"),
        ("", "MISSING_IDS"),
        ("1,a", "INVALID_ID"),
        (",".join(["1"] * 21), "TOO_MANY_IDS"),
    ],
)
def test_invalid_ids(use_case: GetProductsByIds, ids: str | None, code: str) -> None:
    result = use_case.execute(GetProductsByIdsRequest(ids=ids))

    assert isinstance(result, Err)
    assert result.code == code
    assert result.status_hint == 400


def test_validation_failure_does_not_touch_repository() -> None:
    repository = Mock(spec=ProductCatalogRepository)

    GetProductsByIds(product_catalog_repository=repository).execute(
        GetProductsByIdsRequest(ids="x")
    )

    repository.get_by_ids.assert_not_called()


def test_delegates_parsed_ids_to_repository() -> None:
    repository = Mock(spec=ProductCatalogRepository)
    repository.get_by_ids.return_value = []

    GetProductsByIds(product_catalog_repository=repository).execute(
        GetProductsByIdsRequest(ids="3, 4")
    )

    repository.get_by_ids.assert_called_once_with([3, 4])
