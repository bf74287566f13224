"""Test suite for GetFilterOptions use case."""

from __future__ import annotations

from unittest.mock import Mock

from parts_catalog.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from parts_catalog.domain.product import FilterOptions, Product
from parts_catalog.ports.product_catalog_repository import ProductCatalogRepository
from parts_catalog.use_cases.get_filter_options import GetFilterOptions


def test_execute_returns_repository_options() -> None:
    repository = Mock(spec=ProductCatalogRepository)
    options = FilterOptions(connector_types=["M12"], pins=[4])
    repository.filter_options.return_value = options

    result = GetFilterOptions(product_catalog_repository=repository).execute()

    assert result is options
    repository.filter_options.assert_called_once_with()


def test_execute_with_in_memory_repository() -> None:
    repository = InMemoryProductCatalogRepository(
        [
            Product(
                id="00000000-0000-4000-8000-000000000001",
                sku="A",
                name="a",
                gender="Male",
                degree_of_protection=("IP67", "IP68"),
            ),
            Product(
                id="00000000-0000-4000-8000-000000000002",
                sku="B",
                name="b",
                gender="Female",
                degree_of_protection=("IP67",),
            ),
        ]
    )

    result = GetFilterOptions(product_catalog_repository=repository).execute()

    assert result.genders == ["Female", "Male"]
    assert result.degrees_of_protection == ["IP67", "IP68"]
    assert result.connector_types == []
