"""Shared catalog loading for the catalog use cases."""

from __future__ import annotations

import logging
from typing import Mapping

from storefront_catalog.domain.catalog_profile import CatalogProfile
from storefront_catalog.domain.errors import CatalogUnavailableError, DomainError, NotFoundError
from storefront_catalog.domain.item import Item
from storefront_catalog.ports.item_catalog_repository import ItemCatalogRepository

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Resolves catalog profiles and performs the one-shot collection fetch.

    A failed fetch surfaces as CatalogUnavailableError; the engine never runs
    on a partial collection.
    """

    def __init__(
        self,
        item_catalog_repository: ItemCatalogRepository,
        profiles: Mapping[str, CatalogProfile],
    ) -> None:
        self._repository = item_catalog_repository
        self._profiles = profiles

    @property
    def repository(self) -> ItemCatalogRepository:
        return self._repository

    def profile(self, catalog: str) -> CatalogProfile:
        """
        Raises:
            NotFoundError: If no profile is configured for the catalog
        """
        profile = self._profiles.get(catalog)
        if profile is None:
            raise NotFoundError(resource="Catalog", identifier=catalog)
        return profile

    def load(self, catalog: str) -> list[Item]:
        """
        Fetch the whole catalog.

        Raises:
            CatalogUnavailableError: If the data source fails
        """
        try:
            items = self._repository.load_items(catalog)
        except DomainError:
            raise
        except Exception as exc:
            logger.error(
                "Catalog load failed",
                exc_info=exc,
                extra={"catalog": catalog, "error_type": type(exc).__name__},
            )
            raise CatalogUnavailableError(catalog) from exc

        logger.debug("Catalog loaded", extra={"catalog": catalog, "item_count": len(items)})
        return items
