from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Sequence

from parts_catalog.domain.errors import FilterValidationError, PagingValidationError
from parts_catalog.domain.parsing import is_valid_identifier


@dataclass(frozen=True, slots=True)
class ProductDocument:
    """A downloadable file attached to a product (manual, certificate, ...)."""

    url: str
    filename: str
    size: int | None = None


@dataclass(frozen=True)
class Product:
    id: str
    sku: str
    name: str
    mpn: str | None = None
    description: str | None = None
    technical_description: str | None = None
    category_id: str | None = None
    connector_type: str | None = None
    code: str | None = None
    degree_of_protection: tuple[str, ...] = ()
    pins: int | None = None
    gender: str | None = None
    in_stock: bool = False
    stock_quantity: int | None = None
    price: Decimal | None = None
    price_type: str = "per_unit"
    images: tuple[str, ...] = ()
    documents: tuple[ProductDocument, ...] = ()
    datasheet_url: str | None = None
    drawing_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class ProductFilters:
    """
    Filter criteria for a product listing (AND semantics between fields).

    Multi-value fields use IN semantics; an empty tuple means "no constraint".
    """

    ids: tuple[str, ...] = ()
    category_ids: tuple[str, ...] = ()
    connector_types: tuple[str, ...] = ()
    codes: tuple[str, ...] = ()
    degrees_of_protection: tuple[str, ...] = ()
    pins: tuple[int, ...] = ()
    genders: tuple[str, ...] = ()
    in_stock: bool = False
    search: str | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Parsing at the boundary already drops malformed identifiers; this only
        guards the repository contract against callers that skip parsing.

        Raises:
            FilterValidationError: If an identifier filter holds a malformed id
        """
        for name, values in (("ids", self.ids), ("category_ids", self.category_ids)):
            invalid = [value for value in values if not is_valid_identifier(value)]
            if invalid:
                raise FilterValidationError(
                    f"{name} must contain only valid identifiers", invalid=invalid
                )
        if any(not isinstance(pin, int) or isinstance(pin, bool) for pin in self.pins):
            raise FilterValidationError("pins must contain only integers")


@dataclass(frozen=True, slots=True)
class CursorPaging:
    limit: int = 10
    cursor: str | None = None
    include_total: bool = False

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.cursor is not None and not is_valid_identifier(self.cursor):
            raise PagingValidationError("cursor must be a valid identifier")


@dataclass(frozen=True, slots=True)
class ProductPage:
    products: list[Product]
    has_next: bool = False
    next_cursor: str | None = None
    total: int | None = None  # Matching products ignoring the cursor (None if not requested)

    @classmethod
    def from_lookahead(
        cls,
        rows: Sequence[Product],
        limit: int,
        total: int | None = None,
    ) -> ProductPage:
        """
        Build a page from a fetch of up to ``limit + 1`` rows.

        The extra row only signals that another page exists; it is never
        returned. The next cursor is the id of the last row kept.

        Args:
            rows: Products ordered by id ascending, at most limit + 1 of them
            limit: Requested page size
            total: Optional count of all matching products

        Returns:
            ProductPage holding at most ``limit`` products
        """
        if len(rows) > limit:
            page = list(rows[:limit])
            return cls(products=page, has_next=True, next_cursor=page[-1].id, total=total)
        return cls(products=list(rows), has_next=False, next_cursor=None, total=total)


@dataclass(frozen=True, slots=True)
class FilterOptions:
    """Distinct values available for each listing facet."""

    connector_types: list[str] = field(default_factory=list)
    codes: list[str] = field(default_factory=list)
    degrees_of_protection: list[str] = field(default_factory=list)
    pins: list[int] = field(default_factory=list)
    genders: list[str] = field(default_factory=list)
