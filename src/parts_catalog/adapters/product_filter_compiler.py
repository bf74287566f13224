"""Compile ProductFilters into parameterized predicates over the "Product" table."""

from __future__ import annotations

from uuid import UUID

from parts_catalog.adapters.predicate_builder import CompiledFilter, PredicateBuilder
from parts_catalog.domain.product import ProductFilters
from parts_catalog.domain.protection import SEPARATOR, normalize_protection

# Column names as they exist in the storage schema
ID = "id"
CATEGORY_ID = '"categoryId"'
CONNECTOR_TYPE = '"connectorType"'
CODE = "code"
DEGREE_OF_PROTECTION = '"degreeOfProtection"'
PINS = "pins"
GENDER = "gender"
IN_STOCK = '"inStock"'
NAME = "name"
SKU = "sku"
DESCRIPTION = "description"
MPN = "mpn"

SEARCH_PREDICATE = (
    f"({NAME} ILIKE ? OR {SKU} ILIKE ?"
    f" OR ({DESCRIPTION} IS NOT NULL AND {DESCRIPTION} ILIKE ?)"
    f" OR ({MPN} IS NOT NULL AND {MPN} ILIKE ?))"
)

CURSOR_PREDICATE = f"{ID} > ?"

# Stored ratings trimmed and upper-cased element-wise, matching decode_protection()
PROTECTION_RATINGS = (
    "ARRAY(SELECT upper(btrim(rating))"
    f" FROM unnest(string_to_array({DEGREE_OF_PROTECTION}, '{SEPARATOR}')) AS rating)"
)


def compile_product_filters(filters: ProductFilters) -> CompiledFilter:
    """
    Build the WHERE predicates for a product listing.

    The cursor is not part of the result: callers add it with
    with_cursor() so the same filter can drive the total count.

    Args:
        filters: Parsed filter criteria (pre-validated)

    Returns:
        CompiledFilter with every value bound positionally
    """
    builder = PredicateBuilder()

    builder.add_in(ID, [UUID(value) for value in filters.ids])
    builder.add_in(CATEGORY_ID, [UUID(value) for value in filters.category_ids])
    builder.add_in(CONNECTOR_TYPE, filters.connector_types)
    builder.add_in(CODE, filters.codes)
    builder.add_overlap(PROTECTION_RATINGS, normalize_protection(filters.degrees_of_protection))
    builder.add_in(PINS, filters.pins)
    builder.add_in(GENDER, filters.genders)

    if filters.in_stock:
        builder.add(f"{IN_STOCK} = ?", True)

    term = (filters.search or "").strip()
    if term:
        pattern = f"%{escape_like(term)}%"
        builder.add(SEARCH_PREDICATE, pattern, pattern, pattern, pattern)

    return builder.build()


def with_cursor(compiled: CompiledFilter, cursor: str | None) -> CompiledFilter:
    """Append the ``id > cursor`` predicate when a cursor is present."""
    if cursor is None:
        return compiled
    return compiled.and_(CURSOR_PREDICATE, UUID(cursor))


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term only matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
