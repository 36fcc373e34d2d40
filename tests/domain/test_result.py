"""Tests for the Ok/Err result type."""

import pytest

from product_catalog.domain.errors import NotFoundError, ValidationError
from product_catalog.domain.result import Err, Ok


def test_ok_wraps_value() -> None:
    result = Ok(42)

    assert result.is_ok is True
    assert result.value == 42
    assert result.unwrap() == 42


def test_ok_is_immutable() -> None:
    result = Ok([1, 2])

    with pytest.raises(AttributeError):
        result.value = []  # type: ignore[misc]


def test_err_exposes_error_fields() -> None:
    error = ValidationError(
        "Limit cannot be greater than 100",
        errors=[{"field": "limit", "message": "Limit cannot be greater than 100"}],
        code="LIMIT_TOO_LARGE",
    )
    result = Err(error)

    assert result.is_ok is False
    assert result.code == "LIMIT_TOO_LARGE"
    assert result.message == "Limit cannot be greater than 100"
    assert result.status_hint == 400
    assert result.details == [{"field": "limit", "message": "Limit cannot be greater than 100"}]


def test_err_details_none_for_errors_without_field_details() -> None:
    result = Err(NotFoundError("Product", "99", code="PRODUCT_NOT_FOUND"))

    assert result.details is None
    assert result.status_hint == 404


def test_err_unwrap_raises_wrapped_error() -> None:
    error = NotFoundError("Product", "99")

    with pytest.raises(NotFoundError) as exc_info:
        Err(error).unwrap()

    assert exc_info.value is error


def test_ok_and_err_compare_by_value() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Ok(2)
