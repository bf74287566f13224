from __future__ import annotations

from abc import ABC, abstractmethod

from parts_catalog.domain.product import (
    CursorPaging,
    FilterOptions,
    Product,
    ProductFilters,
    ProductPage,
)


class ProductCatalogRepository(ABC):
    """
    Port for product catalog data access.

    Implementations must provide cursor-paginated search ordered by id
    ascending. The total in ProductPage is only computed when
    paging.include_total is set, and always ignores the cursor.

    Contract (Preconditions):
        - filters and paging parameters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def search(self, filters: ProductFilters, paging: CursorPaging) -> ProductPage:
        """
        Search the catalog with filters and cursor paging.

        Precondition: filters and paging must be validated by caller (UseCase).

        Args:
            filters: Filter criteria (AND semantics) - pre-validated
            paging: Cursor paging parameters - pre-validated

        Returns:
            ProductPage with at most paging.limit products
        """
        ...

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None: ...

    @abstractmethod
    def filter_options(self) -> FilterOptions:
        """Distinct non-null values of every facet, each sorted ascending."""
        ...
