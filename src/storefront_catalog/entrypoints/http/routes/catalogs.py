from fastapi import APIRouter, Depends

from storefront_catalog.entrypoints.http.dependencies import (
    get_browse_catalog_use_case,
    get_cart,
    get_catalog_facets_use_case,
    get_get_item_by_id_use_case,
)
from storefront_catalog.entrypoints.http.dtos.catalog_browse import (
    CatalogBrowseQueryDTO,
    CatalogBrowseResponseDTO,
    CatalogFacetsResponseDTO,
    ItemResponseDTO,
)
from storefront_catalog.entrypoints.http.error_responses import ErrorResponse
from storefront_catalog.entrypoints.http.mappers.catalog_browse_mapper import CatalogBrowseMapper
from storefront_catalog.ports.cart import Cart
from storefront_catalog.use_cases.browse_catalog import BrowseCatalog
from storefront_catalog.use_cases.get_catalog_facets import (
    GetCatalogFacets,
    GetCatalogFacetsRequest,
)
from storefront_catalog.use_cases.get_item_by_id import GetItemById, GetItemByIdRequest


router = APIRouter(tags=["Catalogs"])


@router.get(
    "/catalogs/{catalog}/items",
    response_model=CatalogBrowseResponseDTO,
    summary="Browse a catalog",
    description="""
    Filter, sort and paginate the items of a catalog.

    ## Filters
    - All filters use AND semantics
    - search: case-insensitive substring of name or description
    - category: exact tag, "all" disables the filter
    - price_max: inclusive ceiling, defaults to the catalog's rounded maximum price
    - min_rating: inclusive floor, 0 disables the filter

    ## Sorting
    - newest (default), price-low, price-high, rating, popular, name
    - Unknown values sort by newest; ties keep catalog order

    ## Pagination
    - page is clamped into 1..total_pages (there is always at least one page)
    - labels lists the page buttons to render; "..." marks skipped pages

    ## Example
    ```
    GET /v1/catalogs/physical/items?category=audio&sort=price-low&page=2
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "catalog": "physical",
                        "items": [
                            {
                                "id": "550e8400-e29b-41d4-a716-446655440000",
                                "name": "Wireless Headphones",
                                "description": "Over-ear, noise cancelling",
                                "category": "audio",
                                "price": "129.00",
                                "original_price": "159.00",
                                "discount_percent": 19,
                                "rating": 4.5,
                                "review_count": 210,
                                "created_at": "2025-03-01T10:00:00Z",
                                "in_stock": True,
                                "image_url": "",
                                "in_cart": False,
                            }
                        ],
                        "pagination": {
                            "page": 2,
                            "total_pages": 9,
                            "total": 100,
                            "page_size": 12,
                            "labels": [1, 2, 3, 4, 5, "...", 9],
                            "has_previous": True,
                            "has_next": True,
                        },
                        "facets": {
                            "categories": ["all", "audio", "video"],
                            "max_price": "800",
                            "category_counts": {"all": 100, "audio": 60, "video": 40},
                        },
                        "filters": {
                            "search": "",
                            "category": "audio",
                            "price_max": "800",
                            "min_rating": 0,
                        },
                        "sort": "price-low",
                    }
                }
            },
        },
        404: {"model": ErrorResponse, "description": "Unknown catalog"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "Catalog could not be loaded"},
    },
)
def browse_catalog(
    catalog: str,
    query: CatalogBrowseQueryDTO = Depends(),
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
    cart: Cart = Depends(get_cart),
) -> CatalogBrowseResponseDTO:
    """Browse endpoint following parse -> execute -> map -> return pattern."""
    request = CatalogBrowseMapper.to_domain_request(catalog, query)

    result = use_case.execute(request)

    return CatalogBrowseMapper.to_response(result, cart=cart)


@router.get(
    "/catalogs/{catalog}/facets",
    response_model=CatalogFacetsResponseDTO,
    summary="Catalog filter facets",
    description="Category list (\"all\" first) and the price ceiling rounded up to a multiple of 100.",
)
def get_catalog_facets(
    catalog: str,
    use_case: GetCatalogFacets = Depends(get_catalog_facets_use_case),
) -> CatalogFacetsResponseDTO:
    result = use_case.execute(GetCatalogFacetsRequest(catalog=catalog))
    return CatalogBrowseMapper.to_facets_response(result)


@router.get(
    "/catalogs/{catalog}/items/{item_id}",
    response_model=ItemResponseDTO,
    summary="Get item by ID",
    responses={404: {"model": ErrorResponse, "description": "Catalog or item not found"}},
)
def get_item(
    catalog: str,
    item_id: str,
    use_case: GetItemById = Depends(get_get_item_by_id_use_case),
    cart: Cart = Depends(get_cart),
) -> ItemResponseDTO:
    result = use_case.execute(GetItemByIdRequest(catalog=catalog, item_id=item_id))
    return CatalogBrowseMapper.to_item_response(result.item, cart)
