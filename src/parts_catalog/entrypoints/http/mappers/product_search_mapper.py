from __future__ import annotations

from typing import Any

from parts_catalog.domain.parsing import (
    normalize_identifier,
    parse_identifiers,
    parse_integers,
    parse_true_flag,
    resolve_limit,
    split_csv,
)
from parts_catalog.domain.product import CursorPaging, FilterOptions, Product, ProductFilters
from parts_catalog.domain.protection import decode_protection
from parts_catalog.entrypoints.http.dtos.filter_options import FilterOptionsResponseDTO
from parts_catalog.entrypoints.http.dtos.product_search import (
    PaginationDTO,
    ProductDocumentDTO,
    ProductResponseDTO,
    ProductSearchResponseDTO,
    ProductsQueryDTO,
)
from parts_catalog.use_cases.search_product_catalog import (
    SearchProductCatalogRequest,
    SearchProductCatalogResponse,
)


class ProductSearchMapper:
    """Maps between REST DTOs and domain models for the product listing."""

    @staticmethod
    def to_domain_filters(dto: ProductsQueryDTO) -> ProductFilters:
        """
        Converts raw query params to domain filters.

        Splits comma-separated values, drops blanks and duplicates, and drops
        malformed identifiers and pin counts rather than failing the request.

        Args:
            dto: The data transfer object containing raw query parameters

        Returns:
            ProductFilters: Parsed domain filters
        """
        return ProductFilters(
            ids=parse_identifiers(dto.ids),
            category_ids=parse_identifiers(dto.category_id),
            connector_types=split_csv(dto.connector_type),
            codes=split_csv(dto.code),
            degrees_of_protection=decode_protection(dto.degree_of_protection),
            pins=parse_integers(dto.pins),
            genders=split_csv(dto.gender),
            in_stock=parse_true_flag(dto.in_stock),
            search=dto.search.strip() if dto.search and dto.search.strip() else None,
        )

    @staticmethod
    def to_domain_paging(dto: ProductsQueryDTO, max_limit: int, default_limit: int) -> CursorPaging:
        """
        Converts pagination params to domain paging object.

        Args:
            dto: The data transfer object containing raw query parameters
            max_limit: Page size cap for the caller's privilege level
            default_limit: Page size when limit is absent or not a number

        Returns:
            CursorPaging: Clamped limit, validated cursor, total flag
        """
        return CursorPaging(
            limit=resolve_limit(dto.limit, max_limit=max_limit, default=default_limit),
            cursor=normalize_identifier(dto.cursor),
            include_total=parse_true_flag(dto.include_total),
        )

    @staticmethod
    def to_domain_request(
        dto: ProductsQueryDTO, max_limit: int, default_limit: int
    ) -> SearchProductCatalogRequest:
        """Convenience method: builds complete domain request from DTO."""
        return SearchProductCatalogRequest(
            filters=ProductSearchMapper.to_domain_filters(dto),
            paging=ProductSearchMapper.to_domain_paging(dto, max_limit, default_limit),
        )

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        """
        Converts domain Product entity to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return ProductResponseDTO(
            id=product.id,
            sku=product.sku,
            name=product.name,
            mpn=product.mpn,
            description=product.description,
            technical_description=product.technical_description,
            category_id=product.category_id,
            connector_type=product.connector_type,
            code=product.code,
            degree_of_protection=list(product.degree_of_protection),
            pins=product.pins,
            gender=product.gender,
            in_stock=product.in_stock,
            stock_quantity=product.stock_quantity,
            price=str(product.price) if product.price is not None else None,
            price_type=product.price_type,
            images=list(product.images),
            documents=[
                ProductDocumentDTO(url=doc.url, filename=doc.filename, size=doc.size)
                for doc in product.documents
            ],
            datasheet_url=product.datasheet_url,
            drawing_url=product.drawing_url,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    @staticmethod
    def to_response(result: SearchProductCatalogResponse) -> ProductSearchResponseDTO:
        """
        Converts domain search result to REST response with pagination metadata.

        The total is only set when it was computed, so it is left out of the
        serialized body otherwise (routes serialize with exclude_unset).
        """
        pagination: dict[str, Any] = {
            "limit": result.limit,
            "cursor": result.next_cursor,
            "has_next": result.has_next,
            "has_prev": result.has_prev,
        }
        if result.total is not None:
            pagination["total"] = result.total

        return ProductSearchResponseDTO(
            products=[ProductSearchMapper.to_product_response(p) for p in result.products],
            pagination=PaginationDTO(**pagination),
        )

    @staticmethod
    def to_filter_options_response(options: FilterOptions) -> FilterOptionsResponseDTO:
        return FilterOptionsResponseDTO(
            connector_types=options.connector_types,
            codes=options.codes,
            degrees_of_protection=options.degrees_of_protection,
            pins=options.pins,
            genders=options.genders,
        )
