"""Domain error classes.

Protocol-agnostic errors that represent business failures.
Each error carries a stable code and an HTTP status hint; protocol adapters
decide how to render them.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP (or any other transport) by an adapter.
    """

    # Default error code, overridable per instance
    error_code: str = "DOMAIN_ERROR"
    status_hint: int = 400

    def __init__(self, message: str, code: str | None = None, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            code: Specific error code (e.g. "INVALID_PAGE"); defaults to the class code
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        if code is not None:
            self.error_code = code
        super().__init__(message)


class ValidationError(DomainError):
    """Caller input out of bounds or malformed.

    Examples:
        - page=0
        - minPrice greater than maxPrice
        - more than 20 ids in a bulk lookup

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "VALIDATION_ERROR"
    status_hint: int = 400

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        code: str | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "minPrice", "message": "Must not be negative"}]
            code: Specific error code, e.g. "INVALID_PRICE_RANGE"
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, code=code, **context)


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Product with ID not found
        - Some ids of a bulk lookup not found

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"
    status_hint: int = 404

    def __init__(
        self,
        resource: str,
        identifier: str | None = None,
        code: str | None = None,
        message: str | None = None,
        **context: Any,
    ) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Product")
            identifier: Resource identifier
            code: Specific error code, e.g. "PRODUCT_NOT_FOUND"
            message: Overrides the generated message
            **context: Additional context
        """
        if message is None:
            if identifier:
                message = f"{resource} with identifier '{identifier}' not found"
            else:
                message = f"{resource} not found"

        super().__init__(
            message, code=code, resource=resource, identifier=identifier, **context
        )


class ConflictError(DomainError):
    """Business constraint conflict.

    Examples:
        - Duplicate product id in the catalog seed

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"
    status_hint: int = 409


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation. The message is safe to show to
    clients and must not leak internal detail.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
    status_hint: int = 500
