"""Normalization and range checks for caller-supplied parameters.

Every validator accepts raw input (None, text or a number) and returns
``Ok(normalized)`` or ``Err(ValidationError)``. Bad input never raises.
"""

from __future__ import annotations

import math
import re
from typing import Any

from product_catalog.domain.errors import ValidationError
from product_catalog.domain.product import Paging, PriceRange, Product
from product_catalog.domain.result import Err, Ok, Result

DEFAULT_PAGE = 1
MAX_PAGE = 1000
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
MAX_QUERY_LENGTH = 100
MAX_PRICE = 1_000_000
MAX_RATING = 5
MAX_SPEC_LENGTH = 200
MAX_IDS = 20
MAX_NAME_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000

# Plain decimal notation only; rejects Python-specific forms such as "1_000" or "inf"
_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _invalid(field: str, message: str, code: str) -> Err:
    return Err(
        ValidationError(
            message,
            errors=[{"field": field, "message": message}],
            code=code,
        )
    )


def _is_blank(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and raw.strip() == "")


def _parse_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INT_PATTERN.fullmatch(raw.strip()):
        return int(raw.strip())
    return None


def _parse_float(raw: Any) -> float | None:
    """Parse a finite float; anything unparsable yields None."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        if not _FLOAT_PATTERN.fullmatch(raw.strip()):
            return None
        raw = raw.strip()
    elif not isinstance(raw, (int, float)):
        return None
    try:
        value = float(raw)
    except OverflowError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _sanitize(text: str) -> str:
    return text.strip().replace("<", "").replace(">", "")


# ==============================================================================
# Pagination & search
# ==============================================================================


def validate_page(raw: Any) -> Result[int]:
    if _is_blank(raw):
        return Ok(DEFAULT_PAGE)

    page = _parse_int(raw)
    if page is None or page < 1:
        return _invalid("page", "Page number must be greater than 0", "INVALID_PAGE")
    if page > MAX_PAGE:
        return _invalid(
            "page", f"Page number cannot be greater than {MAX_PAGE}", "PAGE_TOO_LARGE"
        )
    return Ok(page)


def validate_limit(raw: Any) -> Result[int]:
    if _is_blank(raw):
        return Ok(DEFAULT_LIMIT)

    limit = _parse_int(raw)
    if limit is None or limit < 1:
        return _invalid("limit", "Limit must be greater than 0", "INVALID_LIMIT")
    if limit > MAX_LIMIT:
        return _invalid(
            "limit", f"Limit cannot be greater than {MAX_LIMIT}", "LIMIT_TOO_LARGE"
        )
    return Ok(limit)


def validate_pagination_params(page: Any = None, limit: Any = None) -> Result[Paging]:
    page_result = validate_page(page)
    if isinstance(page_result, Err):
        return page_result

    limit_result = validate_limit(limit)
    if isinstance(limit_result, Err):
        return limit_result

    return Ok(Paging(page=page_result.value, limit=limit_result.value))


def validate_search_params(query: Any = None) -> Result[str]:
    """Normalize an optional free-text search term (default: empty)."""
    if query is None:
        return Ok("")
    if not isinstance(query, str):
        return _invalid("q", "Search term must be a string", "INVALID_QUERY_TYPE")
    if len(query) > MAX_QUERY_LENGTH:
        return _invalid(
            "q",
            f"Search term cannot exceed {MAX_QUERY_LENGTH} characters",
            "QUERY_TOO_LONG",
        )
    return Ok(_sanitize(query))


# ==============================================================================
# Filters
# ==============================================================================


def validate_price_params(min_price: Any = None, max_price: Any = None) -> Result[PriceRange]:
    """Normalize a price range.

    Missing or unparsable bounds (non-finite values included) fall back to
    0 and +infinity.
    """
    parsed_min = _parse_float(min_price)
    parsed_max = _parse_float(max_price)
    low = parsed_min if parsed_min is not None else 0.0
    high = parsed_max if parsed_max is not None else math.inf

    if low < 0:
        return _invalid(
            "minPrice", "Minimum price cannot be negative", "NEGATIVE_MIN_PRICE"
        )
    if high < 0:
        return _invalid(
            "maxPrice", "Maximum price cannot be negative", "NEGATIVE_MAX_PRICE"
        )
    if low > high:
        return _invalid(
            "minPrice",
            "Minimum price cannot be greater than maximum price",
            "INVALID_PRICE_RANGE",
        )
    if low > MAX_PRICE:
        return _invalid(
            "minPrice", f"Minimum price cannot exceed {MAX_PRICE:,}", "PRICE_TOO_HIGH"
        )
    # Only an explicit maximum is capped
    if parsed_max is not None and high > MAX_PRICE:
        return _invalid(
            "maxPrice", f"Maximum price cannot exceed {MAX_PRICE:,}", "PRICE_TOO_HIGH"
        )

    return Ok(PriceRange(min=low, max=high))


def validate_rating_params(min_rating: Any = None) -> Result[float]:
    parsed = _parse_float(min_rating)
    value = parsed if parsed is not None else 0.0

    if value < 0:
        return _invalid("minRating", "Minimum rating cannot be negative", "NEGATIVE_RATING")
    if value > MAX_RATING:
        return _invalid(
            "minRating",
            f"Minimum rating cannot be greater than {MAX_RATING}",
            "RATING_TOO_HIGH",
        )
    return Ok(value)


def validate_specification_params(spec: Any = None) -> Result[str]:
    if not spec or not isinstance(spec, str):
        return _invalid("spec", "Specification is required", "MISSING_SPEC")

    trimmed = spec.strip()
    if not trimmed:
        return _invalid("spec", "Specification cannot be empty", "EMPTY_SPEC")
    if len(trimmed) > MAX_SPEC_LENGTH:
        return _invalid(
            "spec",
            f"Specification cannot exceed {MAX_SPEC_LENGTH} characters",
            "SPEC_TOO_LONG",
        )
    return Ok(_sanitize(trimmed))


def validate_ids_params(ids: Any = None) -> Result[list[int]]:
    """Parse a comma-separated list of positive product ids."""
    if not ids or not isinstance(ids, str) or not ids.strip():
        return _invalid("ids", "The ids parameter is required", "MISSING_IDS")

    tokens = [token.strip() for token in ids.split(",")]
    if len(tokens) > MAX_IDS:
        return _invalid(
            "ids",
            f"Cannot request more than {MAX_IDS} products at once",
            "TOO_MANY_IDS",
        )

    numeric_ids: list[int] = []
    for token in tokens:
        product_id = _parse_int(token)
        if product_id is None or product_id <= 0:
            return _invalid("ids", f"Invalid ID: {token}", "INVALID_ID")
        numeric_ids.append(product_id)

    return Ok(numeric_ids)


# ==============================================================================
# Product business rules
# ==============================================================================


def validate_product_business_rules(product: Product) -> Result[Product]:
    """Check a product against the catalog's business rules."""
    if not isinstance(product.name, str) or not product.name.strip():
        return _invalid("name", "Product name is required", "INVALID_NAME")
    if len(product.name) > MAX_NAME_LENGTH:
        return _invalid(
            "name",
            f"Product name cannot exceed {MAX_NAME_LENGTH} characters",
            "NAME_TOO_LONG",
        )
    if isinstance(product.price, bool) or not isinstance(product.price, (int, float)) or product.price < 0:
        return _invalid("price", "Price must be a non-negative number", "INVALID_PRICE")
    if product.price > MAX_PRICE:
        return _invalid("price", f"Price cannot exceed {MAX_PRICE:,}", "PRICE_TOO_HIGH")
    if (
        isinstance(product.rating, bool)
        or not isinstance(product.rating, (int, float))
        or not 0 <= product.rating <= MAX_RATING
    ):
        return _invalid(
            "rating", f"Rating must be a number between 0 and {MAX_RATING}", "INVALID_RATING"
        )
    if not isinstance(product.description, str) or not product.description.strip():
        return _invalid("description", "Product description is required", "INVALID_DESCRIPTION")
    if len(product.description) > MAX_DESCRIPTION_LENGTH:
        return _invalid(
            "description",
            f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
            "DESCRIPTION_TOO_LONG",
        )
    return Ok(product)
