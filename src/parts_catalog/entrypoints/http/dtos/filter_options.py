from parts_catalog.entrypoints.http.dtos.product_search import CamelModel


class FilterOptionsResponseDTO(CamelModel):
    connector_types: list[str]
    codes: list[str]
    degrees_of_protection: list[str]
    pins: list[int]
    genders: list[str]
