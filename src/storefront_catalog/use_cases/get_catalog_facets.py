from __future__ import annotations

from dataclasses import dataclass

from storefront_catalog.domain.facets import Facets, derive_facets
from storefront_catalog.use_cases.load_catalog import CatalogLoader


@dataclass(frozen=True, slots=True)
class GetCatalogFacetsRequest:
    catalog: str


@dataclass(frozen=True, slots=True)
class GetCatalogFacetsResponse:
    catalog: str
    facets: Facets


class GetCatalogFacets:
    """Derive the filter-control facets of a catalog (categories, price ceiling)."""

    def __init__(self, catalog_loader: CatalogLoader) -> None:
        self._loader = catalog_loader

    def execute(self, request: GetCatalogFacetsRequest) -> GetCatalogFacetsResponse:
        """
        Raises:
            NotFoundError: If the catalog is not configured
            CatalogUnavailableError: If the data source fails
        """
        profile = self._loader.profile(request.catalog)
        items = self._loader.load(request.catalog)
        return GetCatalogFacetsResponse(
            catalog=request.catalog,
            facets=derive_facets(items, profile.price_max_fallback),
        )
