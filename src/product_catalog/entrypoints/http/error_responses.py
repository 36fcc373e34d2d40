"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "minPrice",
                "message": "Minimum price cannot be greater than maximum price",
            }
        }
    )


class ErrorBody(BaseModel):
    """Error payload: human message, stable machine code, optional field details."""

    message: str
    code: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "error": {
                    "message": "Product with ID 42 not found",
                    "code": "PRODUCT_NOT_FOUND"
                }
            }

        Validation error with field details:
            {
                "error": {
                    "message": "Cannot request more than 20 products at once",
                    "code": "TOO_MANY_IDS",
                    "details": [
                        {
                            "field": "ids",
                            "message": "Cannot request more than 20 products at once"
                        }
                    ]
                }
            }
    """

    error: ErrorBody

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error": {
                        "message": "Product with ID 42 not found",
                        "code": "PRODUCT_NOT_FOUND",
                    }
                },
                {
                    "error": {
                        "message": "Minimum price cannot be greater than maximum price",
                        "code": "INVALID_PRICE_RANGE",
                        "details": [
                            {
                                "field": "minPrice",
                                "message": "Minimum price cannot be greater than maximum price",
                            }
                        ],
                    }
                },
            ]
        }
    )


def error_content(
    message: str, code: str, details: list[dict[str, str]] | None = None
) -> dict:
    """Build the JSON body of an error response."""
    body = ErrorBody(message=message, code=code, details=details)
    return ErrorResponse(error=body).model_dump(exclude_none=True)
