from __future__ import annotations

from abc import ABC, abstractmethod

from storefront_catalog.domain.item import Item


class ItemCatalogRepository(ABC):
    """
    Port for the item data source.

    Catalogs are fetched in one shot and handed to the engine fully
    materialized; there is no streaming and no server-side paging.

    Contract:
        - load_items returns the whole catalog in source order
        - Implementations raise on fetch failure; callers decide how to surface it
        - id uniqueness is the implementation's responsibility
    """

    @abstractmethod
    def load_items(self, catalog: str) -> list[Item]:
        """
        Fetch every item of a catalog.

        Args:
            catalog: Catalog name (e.g. "digital", "physical")

        Returns:
            Items in source order (possibly empty)
        """
        ...

    @abstractmethod
    def get_by_id(self, catalog: str, item_id: str) -> Item | None:
        """
        Fetch a single item.

        Returns:
            The item, or None if the catalog has no such id
        """
        ...
