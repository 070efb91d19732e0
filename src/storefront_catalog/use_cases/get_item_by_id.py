"""Get item by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from storefront_catalog.domain.errors import NotFoundError, ValidationError
from storefront_catalog.domain.item import Item
from storefront_catalog.use_cases.load_catalog import CatalogLoader


@dataclass(frozen=True, slots=True)
class GetItemByIdRequest:
    """Request to get an item of a catalog by ID."""

    catalog: str
    item_id: str


@dataclass(frozen=True, slots=True)
class GetItemByIdResponse:
    """Response containing the requested item."""

    item: Item


class GetItemById:
    """
    Use case for retrieving a single catalog item.

    Responsibilities:
    - Reject blank ids
    - Resolve the catalog (unknown catalog -> NotFoundError)
    - Raise NotFoundError if the item doesn't exist
    """

    def __init__(self, catalog_loader: CatalogLoader) -> None:
        self._loader = catalog_loader

    def execute(self, request: GetItemByIdRequest) -> GetItemByIdResponse:
        """
        Execute the get item by ID use case.

        Raises:
            ValidationError: If item_id is blank
            NotFoundError: If the catalog or the item doesn't exist
        """
        if not request.item_id.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "item_id",
                        "message": "Must not be blank",
                        "code": "BLANK_ID",
                    }
                ]
            )

        self._loader.profile(request.catalog)

        item = self._loader.repository.get_by_id(request.catalog, request.item_id)
        if item is None:
            raise NotFoundError(resource="Item", identifier=request.item_id)

        return GetItemByIdResponse(item=item)
