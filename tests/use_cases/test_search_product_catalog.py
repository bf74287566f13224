"""Test suite for SearchProductCatalog use case."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from parts_catalog.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from parts_catalog.domain.errors import FilterValidationError, PagingValidationError
from parts_catalog.domain.product import CursorPaging, Product, ProductFilters, ProductPage
from parts_catalog.ports.product_catalog_repository import ProductCatalogRepository
from parts_catalog.use_cases.search_product_catalog import (
    SearchProductCatalog,
    SearchProductCatalogRequest,
    SearchProductCatalogResponse,
)

ID_1 = "00000000-0000-4000-8000-000000000001"
ID_2 = "00000000-0000-4000-8000-000000000002"


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock ProductCatalogRepository."""
    return Mock(spec=ProductCatalogRepository)


@pytest.fixture()
def sample_products() -> list[Product]:
    return [
        Product(id=ID_1, sku="M12-A4-F", name="M12 female", connector_type="M12", pins=4),
        Product(id=ID_2, sku="M8-A3-M", name="M8 male", connector_type="M8", pins=3),
    ]


# ==============================================================================
# Happy Path Tests
# ==============================================================================


def test_execute_delegates_to_repository(mock_repository: Mock) -> None:
    mock_repository.search.return_value = ProductPage(products=[])
    use_case = SearchProductCatalog(product_catalog_repository=mock_repository)
    filters = ProductFilters(connector_types=("M12",))
    paging = CursorPaging(limit=5)

    use_case.execute(SearchProductCatalogRequest(filters=filters, paging=paging))

    mock_repository.search.assert_called_once_with(filters=filters, paging=paging)


def test_execute_maps_page_to_response(
    mock_repository: Mock, sample_products: list[Product]
) -> None:
    mock_repository.search.return_value = ProductPage(
        products=sample_products, has_next=True, next_cursor=ID_2, total=12
    )
    use_case = SearchProductCatalog(product_catalog_repository=mock_repository)

    result = use_case.execute(
        SearchProductCatalogRequest(
            filters=ProductFilters(), paging=CursorPaging(limit=2, include_total=True)
        )
    )

    assert isinstance(result, SearchProductCatalogResponse)
    assert result.products == sample_products
    assert result.limit == 2
    assert result.has_next is True
    assert result.next_cursor == ID_2
    assert result.total == 12


def test_first_page_has_no_previous(mock_repository: Mock) -> None:
    mock_repository.search.return_value = ProductPage(products=[])
    use_case = SearchProductCatalog(product_catalog_repository=mock_repository)

    result = use_case.execute(
        SearchProductCatalogRequest(filters=ProductFilters(), paging=CursorPaging())
    )

    assert result.has_prev is False
    assert result.total is None


def test_page_after_cursor_has_previous(mock_repository: Mock) -> None:
    mock_repository.search.return_value = ProductPage(products=[])
    use_case = SearchProductCatalog(product_catalog_repository=mock_repository)

    result = use_case.execute(
        SearchProductCatalogRequest(filters=ProductFilters(), paging=CursorPaging(cursor=ID_1))
    )

    assert result.has_prev is True


def test_execute_with_in_memory_repository(sample_products: list[Product]) -> None:
    use_case = SearchProductCatalog(
        product_catalog_repository=InMemoryProductCatalogRepository(sample_products)
    )

    result = use_case.execute(
        SearchProductCatalogRequest(
            filters=ProductFilters(pins=(4,)),
            paging=CursorPaging(limit=10, include_total=True),
        )
    )

    assert [p.id for p in result.products] == [ID_1]
    assert result.total == 1
    assert result.has_next is False


# ==============================================================================
# Validation Tests
# ==============================================================================


def test_invalid_paging_is_rejected_before_repository(mock_repository: Mock) -> None:
    use_case = SearchProductCatalog(product_catalog_repository=mock_repository)

    with pytest.raises(PagingValidationError):
        use_case.execute(
            SearchProductCatalogRequest(filters=ProductFilters(), paging=CursorPaging(limit=0))
        )

    mock_repository.search.assert_not_called()


def test_malformed_cursor_is_rejected(mock_repository: Mock) -> None:
    use_case = SearchProductCatalog(product_catalog_repository=mock_repository)

    with pytest.raises(PagingValidationError):
        use_case.execute(
            SearchProductCatalogRequest(filters=ProductFilters(), paging=CursorPaging(cursor="p2"))
        )


def test_invalid_filters_are_rejected(mock_repository: Mock) -> None:
    use_case = SearchProductCatalog(product_catalog_repository=mock_repository)

    with pytest.raises(FilterValidationError):
        use_case.execute(
            SearchProductCatalogRequest(
                filters=ProductFilters(category_ids=("not-a-uuid",)), paging=CursorPaging()
            )
        )

    mock_repository.search.assert_not_called()


def test_repository_errors_propagate(mock_repository: Mock) -> None:
    from parts_catalog.domain.errors import SchemaMismatchError

    mock_repository.search.side_effect = SchemaMismatchError("missing column")
    use_case = SearchProductCatalog(product_catalog_repository=mock_repository)

    with pytest.raises(SchemaMismatchError):
        use_case.execute(
            SearchProductCatalogRequest(filters=ProductFilters(), paging=CursorPaging())
        )
