"""Domain error classes.

Protocol-agnostic errors that represent business and storage failures.
These errors are translated to HTTP responses by the entrypoint adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains error information that can be translated
    to an HTTP (or any other transport) error payload.
    """

    # Default error code (machine-readable, stable across releases)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Input validation error that has no safe default.

    Most malformed listing parameters are coerced or dropped instead of
    raising this error. It is reserved for inputs that cannot be defaulted,
    such as the id of a product detail lookup.

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "product_id", "message": "Must be a valid UUID format"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class PagingValidationError(ValidationError):
    """Raised when paging parameters violate the repository contract."""


class FilterValidationError(ValidationError):
    """Raised when filter parameters violate the repository contract."""


class NotFoundError(DomainError):
    """Resource not found.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Product")
            identifier: Resource identifier (e.g., UUID)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Internal error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"


class QueryBuildError(InternalError):
    """A compiled filter does not bind exactly one value per placeholder."""


class StorageError(DomainError):
    """The product store is unreachable or a query failed.

    Not recoverable locally. No retry is attempted here; retries belong to
    the connection pool.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "STORAGE_ERROR"


class SchemaMismatchError(StorageError):
    """A queried column does not exist in the product table.

    Distinct from StorageError so operators can tell a broken schema
    apart from an empty result or an outage.
    """

    error_code: str = "SCHEMA_MISMATCH"


class TableMissingError(StorageError):
    """The product table does not exist."""

    error_code: str = "TABLE_MISSING"
