"""Tests for domain error classes."""

from product_catalog.domain.errors import (
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    ValidationError,
)


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and uses default error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.status_hint == 400
        assert error.context == {}
        assert str(error) == "Something went wrong"

    def test_code_overrides_class_default(self) -> None:
        """An explicit code replaces the class error code for that instance only."""
        error = DomainError("Bad page", code="INVALID_PAGE")

        assert error.error_code == "INVALID_PAGE"
        assert DomainError.error_code == "DOMAIN_ERROR"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_creates_validation_error_with_message(self) -> None:
        error = ValidationError("Invalid input")

        assert error.message == "Invalid input"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.status_hint == 400
        assert error.errors is None

    def test_creates_validation_error_with_default_message(self) -> None:
        """ValidationError uses default message if none provided."""
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None

    def test_creates_validation_error_with_field_errors(self) -> None:
        """ValidationError can store field-level errors."""
        errors = [{"field": "minPrice", "message": "Minimum price cannot be negative"}]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.errors == errors

    def test_keeps_specific_code(self) -> None:
        error = ValidationError("Limit too large", code="LIMIT_TOO_LARGE")

        assert error.error_code == "LIMIT_TOO_LARGE"
        assert isinstance(error, DomainError)


class TestNotFoundError:
    """Tests for NotFoundError class."""

    def test_creates_not_found_error_with_identifier(self) -> None:
        """NotFoundError creates message with resource and identifier."""
        error = NotFoundError("Product", "123")

        assert error.message == "Product with identifier '123' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.status_hint == 404
        assert error.context["resource"] == "Product"
        assert error.context["identifier"] == "123"

    def test_creates_not_found_error_without_identifier(self) -> None:
        error = NotFoundError("Product")

        assert error.message == "Product not found"
        assert error.context["identifier"] is None

    def test_custom_code_and_message(self) -> None:
        error = NotFoundError(
            "Product",
            "42",
            code="PRODUCT_NOT_FOUND",
            message="Product with ID 42 not found",
        )

        assert error.message == "Product with ID 42 not found"
        assert error.error_code == "PRODUCT_NOT_FOUND"


class TestConflictError:
    def test_creates_conflict_error(self) -> None:
        error = ConflictError("Resource already exists")

        assert error.message == "Resource already exists"
        assert error.error_code == "CONFLICT"
        assert error.status_hint == 409


class TestInternalError:
    def test_creates_internal_error(self) -> None:
        error = InternalError("Unexpected condition")

        assert error.message == "Unexpected condition"
        assert error.error_code == "INTERNAL_ERROR"
        assert error.status_hint == 500
