"""Test suite for SearchProductsBySpecification use case."""

from __future__ import annotations

import pytest

from product_catalog.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from product_catalog.domain.analysis import NoResultsAnalysis, SpecificationAnalysis
from product_catalog.domain.result import Err, Ok
from product_catalog.infra.seed_products import SEED_PRODUCTS
from product_catalog.use_cases.search_products_by_specification import (
    SearchProductsBySpecification,
    SearchProductsBySpecificationRequest,
)


@pytest.fixture()
def use_case() -> SearchProductsBySpecification:
    return SearchProductsBySpecification(
        product_catalog_repository=InMemoryProductCatalogRepository(SEED_PRODUCTS)
    )


def test_matches_specification_values(use_case: SearchProductsBySpecification) -> None:
    result = use_case.execute(SearchProductsBySpecificationRequest(spec="apple m2"))

    assert isinstance(result, Ok)
    response = result.value
    assert [p.id for p in response.products] == [2, 5]
    assert response.count == 2
    assert response.search_term == "apple m2"
    assert isinstance(response.analysis, SpecificationAnalysis)
    assert response.analysis.common_specifications[0].specification == "Procesador"
    assert response.analysis.common_specifications[0].count == 2


def test_related_products_capped_at_three(use_case: SearchProductsBySpecification) -> None:
    response = use_case.execute(SearchProductsBySpecificationRequest(spec="bluetooth")).unwrap()

    assert [p.id for p in response.products] == [4, 7]
    assert isinstance(response.analysis, SpecificationAnalysis)
    assert [p.id for p in response.analysis.related_products] == [4, 7]

    response = use_case.execute(SearchProductsBySpecificationRequest(spec="pulgadas")).unwrap()

    assert isinstance(response.analysis, SpecificationAnalysis)
    assert len(response.analysis.related_products) == 3


def test_no_results(use_case: SearchProductsBySpecification) -> None:
    response = use_case.execute(SearchProductsBySpecificationRequest(spec="laser")).unwrap()

    assert response.products == []
    assert isinstance(response.analysis, NoResultsAnalysis)


@pytest.mark.parametrize(
    ("spec", "code"),
    [(None, "MISSING_SPEC"), ("   ", "EMPTY_SPEC"), ("x" * 201, "SPEC_TOO_LONG")],
)
def test_invalid_spec(use_case: SearchProductsBySpecification, spec: str | None, code: str) -> None:
    result = use_case.execute(SearchProductsBySpecificationRequest(spec=spec))

    assert isinstance(result, Err)
    assert result.code == code
