"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons should use lru_cache.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from parts_catalog.adapters.postgres_product_catalog_repository import (
    PostgresProductCatalogRepository,
)
from parts_catalog.infra.db.session import get_session
from parts_catalog.ports.product_catalog_repository import ProductCatalogRepository
from parts_catalog.use_cases.get_filter_options import GetFilterOptions
from parts_catalog.use_cases.get_product_by_id import GetProductById
from parts_catalog.use_cases.search_product_catalog import SearchProductCatalog


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the session into the route
    3. Commit/rollback and close the session when the request ends

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_product_catalog_repository(db: Session = Depends(get_db)) -> ProductCatalogRepository:
    """Repository bound to the request's session. Override this to swap the store in tests."""
    return PostgresProductCatalogRepository(session=db)


def get_search_product_catalog_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> SearchProductCatalog:
    """
    Factory function that returns a configured SearchProductCatalog use case.

    This function is called per-request, ensuring each request gets:
    - Fresh repository instance
    - Fresh use case instance
    - Isolated database session
    """
    return SearchProductCatalog(product_catalog_repository=repository)


def get_get_product_by_id_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> GetProductById:
    return GetProductById(product_catalog_repository=repository)


def get_filter_options_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> GetFilterOptions:
    return GetFilterOptions(product_catalog_repository=repository)
