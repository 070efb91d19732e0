from __future__ import annotations

from typing import Callable

from storefront_catalog.adapters.in_memory_cart import InMemoryCart, InMemoryCartStore
from storefront_catalog.domain.item import Item

ItemFactory = Callable[..., Item]


def test_empty_cart_contains_nothing() -> None:
    cart = InMemoryCart()

    assert not cart.contains("1")
    assert cart.lines() == []


def test_add_then_contains(make_item: ItemFactory) -> None:
    cart = InMemoryCart()

    cart.add(make_item("1"))

    assert cart.contains("1")
    assert not cart.contains("2")


def test_repeat_add_increments_quantity(make_item: ItemFactory) -> None:
    cart = InMemoryCart()
    item = make_item("1")

    cart.add(item)
    cart.add(item)

    assert [(line.item.id, line.quantity) for line in cart.lines()] == [("1", 2)]


def test_lines_keep_first_added_order(make_item: ItemFactory) -> None:
    cart = InMemoryCart()
    cart.add(make_item("b"))
    cart.add(make_item("a"))
    cart.add(make_item("b"))

    assert [line.item.id for line in cart.lines()] == ["b", "a"]


def test_store_returns_same_cart_per_session(make_item: ItemFactory) -> None:
    store = InMemoryCartStore()

    store.get("s1").add(make_item("1"))

    assert store.get("s1").contains("1")
    assert not store.get("s2").contains("1")
