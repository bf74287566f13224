"""Tests for REST error response models."""

from parts_catalog.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    """Tests for ErrorDetail model."""

    def test_creates_error_detail_with_all_fields(self) -> None:
        detail = ErrorDetail(
            field="product_id",
            message="Must be a valid UUID format",
            code="INVALID_UUID",
        )

        assert detail.field == "product_id"
        assert detail.message == "Must be a valid UUID format"
        assert detail.code == "INVALID_UUID"

    def test_creates_error_detail_without_code(self) -> None:
        """ErrorDetail can be created without code (optional)."""
        detail = ErrorDetail(field="product_id", message="Required")

        assert detail.code is None


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_storage_error_shape(self) -> None:
        response = ErrorResponse(error="Product table does not exist", code="TABLE_MISSING")

        assert response.model_dump(exclude_none=True) == {
            "error": "Product table does not exist",
            "code": "TABLE_MISSING",
        }

    def test_validation_error_shape(self) -> None:
        response = ErrorResponse(
            error="Validation failed",
            code="VALIDATION_ERROR",
            errors=[ErrorDetail(field="product_id", message="Must be a valid UUID format")],
        )

        result = response.model_dump()

        assert result["errors"] == [
            {"field": "product_id", "message": "Must be a valid UUID format", "code": None}
        ]

    def test_schema_has_examples(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert "examples" in schema
        codes = {example["code"] for example in schema["examples"]}
        assert {"NOT_FOUND", "TABLE_MISSING", "STORAGE_ERROR", "VALIDATION_ERROR"} <= codes
