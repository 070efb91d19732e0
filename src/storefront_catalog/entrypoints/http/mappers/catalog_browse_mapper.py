from __future__ import annotations

from decimal import Decimal

from storefront_catalog.domain.facets import Facets
from storefront_catalog.domain.item import Item, SortKey
from storefront_catalog.domain.pagination import Page
from storefront_catalog.entrypoints.http.dtos.catalog_browse import (
    AppliedFiltersDTO,
    CatalogBrowseQueryDTO,
    CatalogBrowseResponseDTO,
    CatalogFacetsResponseDTO,
    FacetsDTO,
    ItemResponseDTO,
    PaginationDTO,
)
from storefront_catalog.ports.cart import Cart
from storefront_catalog.use_cases.browse_catalog import (
    BrowseCatalogRequest,
    BrowseCatalogResponse,
)
from storefront_catalog.use_cases.get_catalog_facets import GetCatalogFacetsResponse


class CatalogBrowseMapper:
    """Maps between REST DTOs and domain models for catalog browsing."""

    @staticmethod
    def to_domain_request(catalog: str, dto: CatalogBrowseQueryDTO) -> BrowseCatalogRequest:
        """
        Builds the browse request from query params.

        Handles Decimal conversion of price_max and sort key parsing
        (unknown values fall back to newest, never a 422).
        """
        return BrowseCatalogRequest(
            catalog=catalog,
            search_text=dto.search,
            category=dto.category or "all",
            price_max=Decimal(dto.price_max) if dto.price_max else None,
            min_rating=dto.min_rating,
            sort_key=SortKey.parse(dto.sort),
            page_size=dto.page_size,
            page=dto.page,
        )

    @staticmethod
    def to_item_response(item: Item, cart: Cart | None = None) -> ItemResponseDTO:
        """
        Converts a domain Item to its REST DTO.

        Decimal -> str at the boundary; ``in_cart`` is answered by the cart
        collaborator, not by the engine.
        """
        return ItemResponseDTO(
            id=item.id,
            name=item.name,
            description=item.description,
            category=item.category,
            price=str(item.price),
            original_price=str(item.original_price),
            discount_percent=item.discount_percent,
            rating=item.rating,
            review_count=item.review_count,
            created_at=item.created_at,
            in_stock=item.in_stock,
            image_url=item.image_url,
            in_cart=cart.contains(item.id) if cart is not None else False,
        )

    @staticmethod
    def to_pagination(page: Page) -> PaginationDTO:
        return PaginationDTO(
            page=page.clamped_page,
            total_pages=page.total_pages,
            total=page.total_count,
            page_size=page.page_size,
            labels=list(page.labels),
            has_previous=page.has_previous,
            has_next=page.has_next,
        )

    @staticmethod
    def to_facets(facets: Facets) -> FacetsDTO:
        return FacetsDTO(
            categories=list(facets.categories),
            max_price=str(facets.max_price),
            category_counts=dict(facets.category_counts),
        )

    @staticmethod
    def to_response(
        result: BrowseCatalogResponse,
        cart: Cart | None = None,
    ) -> CatalogBrowseResponseDTO:
        """
        Converts the browse result to the REST response.

        Args:
            result: Domain browse result
            cart: Shopper's cart, used to flag items already added

        Returns:
            CatalogBrowseResponseDTO with items, pagination, facets and the
            filters that were actually applied
        """
        criteria = result.criteria
        return CatalogBrowseResponseDTO(
            catalog=result.catalog,
            items=[
                CatalogBrowseMapper.to_item_response(item, cart) for item in result.page.items
            ],
            pagination=CatalogBrowseMapper.to_pagination(result.page),
            facets=CatalogBrowseMapper.to_facets(result.facets),
            filters=AppliedFiltersDTO(
                search=criteria.search_text,
                category=criteria.category,
                price_max=str(criteria.price_max) if criteria.price_max is not None else None,
                min_rating=criteria.min_rating,
            ),
            sort=result.sort_key.value if result.sort_key is not None else None,
        )

    @staticmethod
    def to_facets_response(result: GetCatalogFacetsResponse) -> CatalogFacetsResponseDTO:
        return CatalogFacetsResponseDTO(
            catalog=result.catalog,
            facets=CatalogBrowseMapper.to_facets(result.facets),
        )
