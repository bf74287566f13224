"""Get product by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from parts_catalog.domain.errors import NotFoundError, ValidationError
from parts_catalog.domain.parsing import normalize_identifier
from parts_catalog.domain.product import Product
from parts_catalog.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class GetProductByIdRequest:
    """Request to get a product by ID."""

    product_id: str


@dataclass(frozen=True, slots=True)
class GetProductByIdResponse:
    """Response containing the requested product."""

    product: Product


class GetProductById:
    """
    Use case for retrieving a single product by ID.

    Responsibilities:
    - Validate product_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if product doesn't exist
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, request: GetProductByIdRequest) -> GetProductByIdResponse:
        """
        Execute the get product by ID use case.

        Raises:
            ValidationError: If product_id is not a valid UUID format
            NotFoundError: If product with given ID doesn't exist
        """
        product_id = normalize_identifier(request.product_id)
        if product_id is None:
            raise ValidationError(
                errors=[
                    {
                        "field": "product_id",
                        "message": "Must be a valid UUID format",
                        "code": "INVALID_UUID",
                    }
                ]
            )

        product = self._repository.get_by_id(product_id)

        if product is None:
            raise NotFoundError(resource="Product", identifier=product_id)

        return GetProductByIdResponse(product=product)
