from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront_catalog.domain.catalog_view import CatalogView
from storefront_catalog.domain.facets import Facets
from storefront_catalog.domain.item import FilterCriteria, PageState, SortKey
from storefront_catalog.domain.pagination import Page
from storefront_catalog.use_cases.load_catalog import CatalogLoader


@dataclass(frozen=True, slots=True)
class BrowseCatalogRequest:
    catalog: str
    search_text: str = ""
    category: str = "all"
    price_max: Decimal | None = None  # None: seeded from facets
    min_rating: float = 0.0
    sort_key: SortKey | None = None
    page_size: int | None = None  # None: profile default
    page: int = 1


@dataclass(frozen=True, slots=True)
class BrowseCatalogResponse:
    catalog: str
    page: Page
    facets: Facets
    criteria: FilterCriteria
    sort_key: SortKey | None


class BrowseCatalog:
    """
    Filter, sort and paginate one catalog.

    Runs the catalog view state machine for a single request: load the
    collection (facets seed the price ceiling), apply criteria and sort
    (page resets to 1), then move to the requested page (clamped).
    """

    def __init__(self, catalog_loader: CatalogLoader) -> None:
        self._loader = catalog_loader

    def execute(self, request: BrowseCatalogRequest) -> BrowseCatalogResponse:
        """
        Execute a catalog browse.

        Args:
            request: Catalog name plus filter, sort and page state

        Returns:
            Response with the visible page, facets and effective criteria

        Raises:
            NotFoundError: If the catalog is not configured
            PagingValidationError: If page_size is out of range
            WindowValidationError: If the profile's page window is invalid
            CatalogUnavailableError: If the data source fails
        """
        profile = self._loader.profile(request.catalog)

        page_size = request.page_size if request.page_size is not None else profile.page_size
        PageState(page_size=page_size, requested_page=request.page).validate()
        profile.window.validate()

        view = CatalogView(profile)
        view.load(self._loader.load(request.catalog))

        criteria = FilterCriteria(
            search_text=request.search_text,
            category=request.category,
            price_max=(
                request.price_max if request.price_max is not None else view.facets.max_price
            ),
            min_rating=request.min_rating,
        )
        view.apply(criteria, request.sort_key, page_size)
        page = view.change_page(request.page)

        return BrowseCatalogResponse(
            catalog=request.catalog,
            page=page,
            facets=view.facets,
            criteria=criteria,
            sort_key=request.sort_key,
        )
