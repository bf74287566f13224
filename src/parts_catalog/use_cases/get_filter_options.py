from __future__ import annotations

from parts_catalog.domain.product import FilterOptions
from parts_catalog.ports.product_catalog_repository import ProductCatalogRepository


class GetFilterOptions:
    """Lists the distinct facet values that products in the catalog actually use."""

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self) -> FilterOptions:
        return self._repository.filter_options()
