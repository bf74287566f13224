from __future__ import annotations

from uuid import UUID

from parts_catalog.domain.parsing import normalize_identifier
from parts_catalog.domain.product import (
    CursorPaging,
    FilterOptions,
    Product,
    ProductFilters,
    ProductPage,
)
from parts_catalog.domain.protection import normalize_protection
from parts_catalog.ports.product_catalog_repository import ProductCatalogRepository


class InMemoryProductCatalogRepository(ProductCatalogRepository):
    """
    Canonical contract implementation for tests.

    - Orders products by id ascending, regardless of insertion order
    - Applies AND-semantics filtering, IN-semantics within a field
    - Applies the cursor AFTER filtering and counts totals WITHOUT it
    - Fetches limit + 1 rows and builds the page like the SQL adapter does
    """

    def __init__(self, products: list[Product]) -> None:
        self._products = sorted(products, key=lambda product: UUID(product.id))

    def search(self, filters: ProductFilters, paging: CursorPaging) -> ProductPage:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [product for product in self._products if self._matches(product, filters)]
        total = len(matches) if paging.include_total else None

        if paging.cursor is not None:
            watermark = UUID(paging.cursor)
            matches = [product for product in matches if UUID(product.id) > watermark]

        return ProductPage.from_lookahead(matches[: paging.limit + 1], paging.limit, total=total)

    def get_by_id(self, product_id: str) -> Product | None:
        identifier = normalize_identifier(product_id)
        return next((product for product in self._products if product.id == identifier), None)

    def filter_options(self) -> FilterOptions:
        return FilterOptions(
            connector_types=sorted({p.connector_type for p in self._products if p.connector_type}),
            codes=sorted({p.code for p in self._products if p.code}),
            degrees_of_protection=sorted(
                {rating for p in self._products for rating in p.degree_of_protection}
            ),
            pins=sorted({p.pins for p in self._products if p.pins is not None}),
            genders=sorted({p.gender for p in self._products if p.gender}),
        )

    def _matches(self, product: Product, filters: ProductFilters) -> bool:
        if filters.ids and product.id not in filters.ids:
            return False
        if filters.category_ids and product.category_id not in filters.category_ids:
            return False
        if filters.connector_types and product.connector_type not in filters.connector_types:
            return False
        if filters.codes and product.code not in filters.codes:
            return False
        wanted_ratings = set(normalize_protection(filters.degrees_of_protection))
        stored_ratings = set(normalize_protection(product.degree_of_protection))
        if wanted_ratings and not wanted_ratings & stored_ratings:
            return False
        if filters.pins and product.pins not in filters.pins:
            return False
        if filters.genders and product.gender not in filters.genders:
            return False
        if filters.in_stock and not product.in_stock:
            return False
        term = (filters.search or "").strip().casefold()
        if term and not self._matches_search(product, term):
            return False
        return True

    @staticmethod
    def _matches_search(product: Product, term: str) -> bool:
        fields = (product.name, product.sku, product.description, product.mpn)
        return any(value is not None and term in value.casefold() for value in fields)
