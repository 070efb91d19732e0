from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront_catalog.domain.errors import ValidationError
from storefront_catalog.ports.cart import CartLine, CartStore
from storefront_catalog.ports.notifier import NotificationKind, Notifier
from storefront_catalog.use_cases.get_item_by_id import GetItemById, GetItemByIdRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddItemToCartRequest:
    session_id: str
    catalog: str
    item_id: str


@dataclass(frozen=True, slots=True)
class AddItemToCartResponse:
    lines: list[CartLine]


class AddItemToCart:
    """
    Put a catalog item into the session's cart and tell the shopper.

    The notification is fire-and-forget; its outcome never affects the
    response.
    """

    def __init__(
        self,
        get_item_by_id: GetItemById,
        cart_store: CartStore,
        notifier: Notifier,
    ) -> None:
        self._get_item_by_id = get_item_by_id
        self._cart_store = cart_store
        self._notifier = notifier

    def execute(self, request: AddItemToCartRequest) -> AddItemToCartResponse:
        """
        Raises:
            NotFoundError: If the catalog or item doesn't exist
            ValidationError: If the item is out of stock
        """
        item = self._get_item_by_id.execute(
            GetItemByIdRequest(catalog=request.catalog, item_id=request.item_id)
        ).item

        if not item.in_stock:
            self._notifier.notify(
                NotificationKind.ERROR, "Unavailable", f"{item.name} is out of stock"
            )
            raise ValidationError(
                errors=[
                    {
                        "field": "item_id",
                        "message": "Item is out of stock",
                        "code": "OUT_OF_STOCK",
                    }
                ]
            )

        cart = self._cart_store.get(request.session_id)
        cart.add(item)
        logger.info(
            "Item added to cart",
            extra={"session_id": request.session_id, "item_id": item.id},
        )
        self._notifier.notify(NotificationKind.SUCCESS, "Added", f"{item.name} added to cart")

        return AddItemToCartResponse(lines=cart.lines())
