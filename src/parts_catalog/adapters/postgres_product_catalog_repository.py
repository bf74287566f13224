"""PostgreSQL implementation of ProductCatalogRepository."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator
from uuid import UUID

from sqlalchemy import func, select, text
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session

from parts_catalog.adapters.predicate_builder import CompiledFilter
from parts_catalog.adapters.product_filter_compiler import compile_product_filters, with_cursor
from parts_catalog.domain.errors import SchemaMismatchError, StorageError, TableMissingError
from parts_catalog.domain.parsing import normalize_identifier
from parts_catalog.domain.product import (
    CursorPaging,
    FilterOptions,
    Product,
    ProductDocument,
    ProductFilters,
    ProductPage,
)
from parts_catalog.domain.protection import decode_protection
from parts_catalog.infra.db.models.product import ProductRow
from parts_catalog.ports.product_catalog_repository import ProductCatalogRepository

if TYPE_CHECKING:
    from sqlalchemy.orm import InstrumentedAttribute
    from sqlalchemy.sql import Select
    from sqlalchemy.sql.elements import TextClause

logger = logging.getLogger(__name__)

UNDEFINED_COLUMN = "42703"
UNDEFINED_TABLE = "42P01"

DEFAULT_PRICE_TYPE = "per_unit"


class PostgresProductCatalogRepository(ProductCatalogRepository):
    """
    PostgreSQL implementation of ProductCatalogRepository.

    - Compiles filters into positional predicates (never inlines values)
    - Fetches limit + 1 rows ordered by id to detect a next page
    - Runs COUNT(*) without the cursor predicate only when a total is requested
    - Translates driver errors into SchemaMismatch/TableMissing/Storage errors
    - Converts ProductRow (infrastructure) to Product (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def search(self, filters: ProductFilters, paging: CursorPaging) -> ProductPage:
        """
        Search the catalog with filters and cursor paging.

        Executes up to two queries:
        1. SELECT ... WHERE <filters> AND id > cursor ORDER BY id LIMIT limit + 1
        2. SELECT COUNT(*) ... WHERE <filters> (only if paging.include_total)

        Both queries succeed or the call raises; a page is never returned
        without its requested total.

        Raises:
            SchemaMismatchError: A filtered column is missing from the table
            TableMissingError: The product table does not exist
            StorageError: Any other storage failure
        """
        compiled = compile_product_filters(filters)
        page_filter = with_cursor(compiled, paging.cursor)

        query = self._select(page_filter).limit(paging.limit + 1)

        logger.debug(
            "Executing product page query",
            extra={
                "predicates": len(page_filter.fragments),
                "limit": paging.limit,
                "include_total": paging.include_total,
            },
        )

        with _translate_storage_errors("search products"):
            rows = self._session.execute(query).scalars().all()

            total: int | None = None
            if paging.include_total:
                total = self._session.execute(self._count(compiled)).scalar() or 0

        products = [self._to_domain(row) for row in rows]
        return ProductPage.from_lookahead(products, paging.limit, total=total)

    def get_by_id(self, product_id: str) -> Product | None:
        """
        Get product by ID.

        Args:
            product_id: Product ID (expected to be a valid UUID string)

        Returns:
            Product entity if found, None otherwise (including malformed ids)
        """
        identifier = normalize_identifier(product_id)
        if identifier is None:
            return None

        query = select(ProductRow).where(ProductRow.id == UUID(identifier))
        with _translate_storage_errors("get product"):
            row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def filter_options(self) -> FilterOptions:
        with _translate_storage_errors("fetch filter options"):
            connector_types = self._distinct(ProductRow.connector_type)
            codes = self._distinct(ProductRow.code)
            protection_values = self._distinct(ProductRow.degree_of_protection)
            pins = self._distinct(ProductRow.pins)
            genders = self._distinct(ProductRow.gender)

        degrees = {rating for raw in protection_values for rating in decode_protection(raw)}

        return FilterOptions(
            connector_types=[value for value in connector_types if value],
            codes=[value for value in codes if value],
            degrees_of_protection=sorted(degrees),
            pins=sorted(int(value) for value in pins),
            genders=[value for value in genders if value],
        )

    def _select(self, compiled: CompiledFilter) -> Select[tuple[ProductRow]]:
        """Build the page query: filters applied, ordered by id ascending."""
        query = select(ProductRow)
        if not compiled.is_empty:
            query = query.where(self._where(compiled))
        return query.order_by(ProductRow.id.asc())

    def _count(self, compiled: CompiledFilter) -> Select[tuple[int]]:
        query = select(func.count()).select_from(ProductRow)
        if not compiled.is_empty:
            query = query.where(self._where(compiled))
        return query

    @staticmethod
    def _where(compiled: CompiledFilter) -> TextClause:
        condition, params = compiled.render("named")
        return text(condition).bindparams(**params)  # type: ignore[arg-type]

    def _distinct(self, column: InstrumentedAttribute[Any]) -> list[Any]:
        query = select(column).where(column.is_not(None)).distinct().order_by(column.asc())
        return list(self._session.execute(query).scalars().all())

    def _to_domain(self, row: ProductRow) -> Product:
        """
        Convert database model (ProductRow) to domain entity (Product).

        Args:
            row: SQLAlchemy ProductRow model

        Returns:
            Product domain entity
        """
        return Product(
            id=str(row.id),  # Convert UUID to string
            sku=row.sku,
            name=row.name,
            mpn=row.mpn,
            description=row.description,
            technical_description=row.technical_description,
            category_id=str(row.category_id) if row.category_id else None,
            connector_type=row.connector_type,
            code=row.code,
            degree_of_protection=decode_protection(row.degree_of_protection),
            pins=row.pins,
            gender=row.gender,
            in_stock=bool(row.in_stock),
            stock_quantity=row.stock_quantity,
            price=row.price,  # Already Decimal from NUMERIC column
            price_type=row.price_type or DEFAULT_PRICE_TYPE,
            images=tuple(image for image in row.images or () if isinstance(image, str)),
            documents=_documents(row.documents),
            datasheet_url=row.datasheet_url,
            drawing_url=row.drawing_url,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


def _documents(raw: list[Any] | None) -> tuple[ProductDocument, ...]:
    """Decode the documents JSON array; entries without a url are skipped."""
    documents = []
    for entry in raw or ():
        if not isinstance(entry, dict) or not isinstance(entry.get("url"), str):
            continue
        url = entry["url"]
        filename = entry.get("filename")
        size = entry.get("size")
        documents.append(
            ProductDocument(
                url=url,
                filename=filename if isinstance(filename, str) else url.rsplit("/", 1)[-1],
                size=size if isinstance(size, int) and not isinstance(size, bool) else None,
            )
        )
    return tuple(documents)


def _sqlstate(exc: DBAPIError) -> str | None:
    # psycopg 3 exposes sqlstate, psycopg2 exposes pgcode
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


@contextmanager
def _translate_storage_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as domain storage errors."""
    try:
        yield
    except DBAPIError as exc:
        sqlstate = _sqlstate(exc)
        if sqlstate == UNDEFINED_COLUMN:
            raise SchemaMismatchError(
                "Product table is missing an expected column",
                operation=operation,
            ) from exc
        if sqlstate == UNDEFINED_TABLE:
            raise TableMissingError("Product table does not exist", operation=operation) from exc
        raise StorageError(f"Failed to {operation}", operation=operation) from exc
    except SQLAlchemyError as exc:
        raise StorageError(f"Failed to {operation}", operation=operation) from exc
