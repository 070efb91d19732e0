from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront_catalog.domain.item import Item


@dataclass(frozen=True)
class CartLine:
    item: Item
    quantity: int


class Cart(ABC):
    """Port for a shopper's cart. Queried by the rendering layer, never by the engine."""

    @abstractmethod
    def add(self, item: Item) -> None: ...

    @abstractmethod
    def contains(self, item_id: str) -> bool: ...

    @abstractmethod
    def lines(self) -> list[CartLine]: ...


class CartStore(ABC):
    """Port resolving the cart of a session."""

    @abstractmethod
    def get(self, session_id: str) -> Cart: ...
