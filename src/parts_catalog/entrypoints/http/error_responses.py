"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "product_id",
                "message": "Must be a valid UUID format",
                "code": "INVALID_UUID",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Storage schema drift:
            {
                "error": "Product table is missing an expected column",
                "code": "SCHEMA_MISMATCH"
            }

        Validation error with field details:
            {
                "error": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "product_id",
                        "message": "Must be a valid UUID format",
                        "code": "INVALID_UUID"
                    }
                ]
            }
    """

    error: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"error": "Product with identifier '…' not found", "code": "NOT_FOUND"},
                {"error": "Product table does not exist", "code": "TABLE_MISSING"},
                {"error": "Failed to search products", "code": "STORAGE_ERROR"},
                {
                    "error": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "product_id",
                            "message": "Must be a valid UUID format",
                            "code": "INVALID_UUID",
                        },
                    ],
                },
            ]
        }
    )
