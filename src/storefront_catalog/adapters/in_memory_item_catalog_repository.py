from __future__ import annotations

from typing import Mapping, Sequence

from storefront_catalog.domain.item import Item
from storefront_catalog.ports.item_catalog_repository import ItemCatalogRepository


class InMemoryItemCatalogRepository(ItemCatalogRepository):
    """
    Canonical contract implementation for tests.

    - Stores items per catalog in insertion order
    - Unknown catalogs load as empty collections
    - Returns copies so callers cannot mutate the stored catalog
    """

    def __init__(self, catalogs: Mapping[str, Sequence[Item]] | None = None) -> None:
        self._catalogs: dict[str, list[Item]] = {
            name: list(items) for name, items in (catalogs or {}).items()
        }

    def load_items(self, catalog: str) -> list[Item]:
        return list(self._catalogs.get(catalog, []))

    def get_by_id(self, catalog: str, item_id: str) -> Item | None:
        for item in self._catalogs.get(catalog, []):
            if item.id == item_id:
                return item
        return None
