from typing import Annotated

from fastapi import APIRouter, Depends, Query

from parts_catalog.entrypoints.http.auth import max_page_limit
from parts_catalog.entrypoints.http.dependencies import (
    get_filter_options_use_case,
    get_get_product_by_id_use_case,
    get_search_product_catalog_use_case,
)
from parts_catalog.entrypoints.http.dtos.filter_options import FilterOptionsResponseDTO
from parts_catalog.entrypoints.http.dtos.product_search import (
    ProductResponseDTO,
    ProductSearchResponseDTO,
    ProductsQueryDTO,
)
from parts_catalog.entrypoints.http.error_responses import ErrorResponse
from parts_catalog.entrypoints.http.mappers.product_search_mapper import ProductSearchMapper
from parts_catalog.infra import config
from parts_catalog.use_cases.get_filter_options import GetFilterOptions
from parts_catalog.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest
from parts_catalog.use_cases.search_product_catalog import SearchProductCatalog


router = APIRouter(tags=["Products"])


@router.get(
    "/products",
    response_model=ProductSearchResponseDTO,
    response_model_exclude_unset=True,
    summary="List products",
    description="""
    List catalog products with optional filters and cursor pagination.

    ## Filters
    - All filters use AND semantics; comma-separated values use IN semantics
    - Empty or malformed entries are dropped, never rejected
    - `degreeOfProtection` matches products carrying any of the given ratings
    - `inStock` and `includeTotal` only take effect with the literal `true`

    ## Pagination
    - Results are ordered by id ascending
    - Default limit: 10; max 100 (10000 with an admin session)
    - Pass `pagination.cursor` of a response as `cursor` to get the next page
    - `total` ignores the cursor, so it is the same on every page

    ## Example
    ```
    GET /v1/products?connectorType=M12,M8&pins=4&limit=2
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "products": [
                            {
                                "id": "0f8b7a52-4c1e-4f5a-9d0e-2b1f6c3a9e01",
                                "sku": "M12-A4-F-ST",
                                "name": "M12 A-coded 4-pin female straight",
                                "mpn": None,
                                "description": "Field-wireable connector",
                                "categoryId": None,
                                "connectorType": "M12",
                                "code": "A",
                                "degreeOfProtection": ["IP67", "IP68"],
                                "pins": 4,
                                "gender": "Female",
                                "inStock": True,
                                "price": "12.50",
                            }
                        ],
                        "pagination": {
                            "limit": 2,
                            "cursor": "0f8b7a52-4c1e-4f5a-9d0e-2b1f6c3a9e01",
                            "hasNext": True,
                            "hasPrev": False,
                            "total": 5,
                        },
                    }
                }
            },
        },
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
)
def list_products(
    query: Annotated[ProductsQueryDTO, Query()],
    max_limit: int = Depends(max_page_limit),
    use_case: SearchProductCatalog = Depends(get_search_product_catalog_use_case),
) -> ProductSearchResponseDTO:
    """List products endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = ProductSearchMapper.to_domain_request(
        query,
        max_limit=max_limit,
        default_limit=config.default_page_limit(),
    )

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return ProductSearchMapper.to_response(result)


@router.get(
    "/products/filter-options",
    response_model=FilterOptionsResponseDTO,
    summary="List filter values",
    description="Distinct values of every listing facet, taken from the products themselves.",
    responses={500: {"description": "Storage failure", "model": ErrorResponse}},
)
def get_filter_options(
    use_case: GetFilterOptions = Depends(get_filter_options_use_case),
) -> FilterOptionsResponseDTO:
    return ProductSearchMapper.to_filter_options_response(use_case.execute())


@router.get(
    "/products/{product_id}",
    response_model=ProductResponseDTO,
    summary="Get product",
    responses={
        404: {"description": "Product not found", "model": ErrorResponse},
        422: {"description": "Malformed product id", "model": ErrorResponse},
    },
)
def get_product(
    product_id: str,
    use_case: GetProductById = Depends(get_get_product_by_id_use_case),
) -> ProductResponseDTO:
    result = use_case.execute(GetProductByIdRequest(product_id=product_id))
    return ProductSearchMapper.to_product_response(result.product)
