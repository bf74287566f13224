from __future__ import annotations

import logging
from dataclasses import dataclass

from parts_catalog.domain.product import (
    CursorPaging,
    Product,
    ProductFilters,
)
from parts_catalog.ports.product_catalog_repository import ProductCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchProductCatalogRequest:
    filters: ProductFilters
    paging: CursorPaging


@dataclass(frozen=True, slots=True)
class SearchProductCatalogResponse:
    products: list[Product]
    limit: int
    has_next: bool = False
    has_prev: bool = False
    next_cursor: str | None = None
    total: int | None = None  # Matching products ignoring the cursor (None if not requested)


class SearchProductCatalog:
    """
    Product catalog search with filters and cursor pagination.

    This use case validates the request and delegates filtering and paging
    to the repository adapter. No filtering logic exists in the use case.
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, request: SearchProductCatalogRequest) -> SearchProductCatalogResponse:
        """
        Execute catalog search.

        Validates request parameters before delegating to repository.
        This is the single source of validation (contract programming).

        Args:
            request: Search parameters (filters and paging)

        Returns:
            Response containing one page of products and pagination metadata

        Raises:
            PagingValidationError: If paging parameters are invalid
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()
        request.paging.validate()

        page = self._repository.search(
            filters=request.filters,
            paging=request.paging,
        )

        logger.debug(
            "Product catalog page fetched",
            extra={"returned": len(page.products), "has_next": page.has_next},
        )

        return SearchProductCatalogResponse(
            products=page.products,
            limit=request.paging.limit,
            has_next=page.has_next,
            has_prev=request.paging.cursor is not None,
            next_cursor=page.next_cursor,
            total=page.total,
        )
