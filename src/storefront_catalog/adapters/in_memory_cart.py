from __future__ import annotations

from storefront_catalog.domain.item import Item
from storefront_catalog.ports.cart import Cart, CartLine, CartStore


class InMemoryCart(Cart):
    """
    Process-local cart.

    - Lines kept in the order items were first added
    - Adding an item already in the cart increments its quantity
    """

    def __init__(self) -> None:
        self._lines: dict[str, CartLine] = {}

    def add(self, item: Item) -> None:
        existing = self._lines.get(item.id)
        quantity = existing.quantity + 1 if existing else 1
        self._lines[item.id] = CartLine(item=item, quantity=quantity)

    def contains(self, item_id: str) -> bool:
        return item_id in self._lines

    def lines(self) -> list[CartLine]:
        return list(self._lines.values())


class InMemoryCartStore(CartStore):
    """Carts keyed by session id, created on first access."""

    def __init__(self) -> None:
        self._carts: dict[str, InMemoryCart] = {}

    def get(self, session_id: str) -> Cart:
        if session_id not in self._carts:
            self._carts[session_id] = InMemoryCart()
        return self._carts[session_id]
