from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductDocumentDTO(CamelModel):
    url: str
    filename: str
    size: int | None = None


class ProductResponseDTO(CamelModel):
    id: str
    sku: str
    name: str
    mpn: str | None
    description: str | None
    technical_description: str | None
    category_id: str | None
    connector_type: str | None
    code: str | None
    degree_of_protection: list[str]
    pins: int | None
    gender: str | None
    in_stock: bool
    stock_quantity: int | None
    price: str | None
    price_type: str
    images: list[str]
    documents: list[ProductDocumentDTO]
    datasheet_url: str | None
    drawing_url: str | None
    created_at: datetime | None
    updated_at: datetime | None


class ProductsQueryDTO(BaseModel):
    """
    Query parameters for listing products.

    Every field arrives as a raw string: malformed values are coerced or
    dropped by the mapper instead of failing the request.
    """

    model_config = ConfigDict(populate_by_name=True)

    limit: str | None = Field(
        default=None,
        description="Page size, clamped to [1, max]. Max is 100, or 10000 for admins",
        examples=["10"],
    )
    cursor: str | None = Field(
        default=None,
        description="Id of the last product of the previous page. Ignored if malformed",
        examples=["0f8b7a52-4c1e-4f5a-9d0e-2b1f6c3a9e01"],
    )
    ids: str | None = Field(
        default=None,
        description="Comma-separated product ids. Malformed ids are dropped",
    )
    category_id: str | None = Field(
        default=None,
        alias="categoryId",
        description="Comma-separated category ids. Malformed ids are dropped",
    )
    connector_type: str | None = Field(
        default=None,
        alias="connectorType",
        description="Comma-separated connector types",
        examples=["M12,M8"],
    )
    code: str | None = Field(
        default=None,
        description="Comma-separated connector codings",
        examples=["A,D"],
    )
    degree_of_protection: str | None = Field(
        default=None,
        alias="degreeOfProtection",
        description="Comma-separated IP ratings; matches products carrying any of them",
        examples=["IP67,IP68"],
    )
    pins: str | None = Field(
        default=None,
        description="Comma-separated pin counts. Non-numeric entries are dropped",
        examples=["4,5"],
    )
    gender: str | None = Field(
        default=None,
        description="Comma-separated genders",
        examples=["Male"],
    )
    in_stock: str | None = Field(
        default=None,
        alias="inStock",
        description='Only "true" constrains the listing to in-stock products',
        examples=["true"],
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive partial match on name, sku, description and mpn",
        examples=["m12"],
    )
    include_total: str | None = Field(
        default=None,
        alias="includeTotal",
        description='"true" adds the total number of matching products',
        examples=["true"],
    )


class PaginationDTO(CamelModel):
    limit: int
    cursor: str | None
    has_next: bool
    has_prev: bool
    total: int | None = None


class ProductSearchResponseDTO(CamelModel):
    products: list[ProductResponseDTO]
    pagination: PaginationDTO
