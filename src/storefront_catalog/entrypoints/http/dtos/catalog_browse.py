from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ItemResponseDTO(BaseModel):
    id: str
    name: str
    description: str
    category: str
    price: str
    original_price: str
    discount_percent: int
    rating: float
    review_count: int
    created_at: datetime | None
    in_stock: bool
    image_url: str
    in_cart: bool = False


class CatalogBrowseQueryDTO(BaseModel):
    """Query parameters for browsing a catalog."""

    search: str = Field(
        default="",
        description="Case-insensitive substring matched against name or description",
        examples=["wireless"],
        max_length=200,
    )
    category: str = Field(
        default="all",
        description='Exact category tag, or "all" for no category filter',
        examples=["audio"],
    )
    price_max: str | None = Field(
        default=None,
        description="Maximum price (inclusive, decimal as string). Defaults to the catalog price ceiling",
        examples=["800.00"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    min_rating: float = Field(
        default=0,
        description="Minimum rating (0 means no constraint)",
        examples=[4],
        ge=0,
        le=5,
    )
    sort: str | None = Field(
        default=None,
        description="newest, price-low, price-high, rating, popular or name. Unknown values sort by newest",
        examples=["price-low"],
    )
    page: int = Field(
        default=1,
        description="Requested page; out-of-range values are clamped",
        examples=[1],
    )
    page_size: int | None = Field(
        default=None,
        description="Items per page. Defaults to the catalog page size",
        examples=[12],
        ge=1,
        le=200,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "search": "wireless",
                "category": "audio",
                "price_max": "800.00",
                "min_rating": 4,
                "sort": "price-low",
                "page": 1,
                "page_size": 12,
            }
        }
    )


class PaginationDTO(BaseModel):
    page: int
    total_pages: int
    total: int
    page_size: int
    labels: list[int | str]
    has_previous: bool
    has_next: bool


class FacetsDTO(BaseModel):
    categories: list[str]
    max_price: str
    category_counts: dict[str, int]


class AppliedFiltersDTO(BaseModel):
    search: str
    category: str
    price_max: str | None
    min_rating: float


class CatalogBrowseResponseDTO(BaseModel):
    catalog: str
    items: list[ItemResponseDTO]
    pagination: PaginationDTO
    facets: FacetsDTO
    filters: AppliedFiltersDTO
    sort: str | None


class CatalogFacetsResponseDTO(BaseModel):
    catalog: str
    facets: FacetsDTO
