"""Test suite for AddItemToCart use case."""

from __future__ import annotations

from typing import Callable
from unittest.mock import Mock

import pytest

from storefront_catalog.adapters.in_memory_cart import InMemoryCartStore
from storefront_catalog.adapters.in_memory_item_catalog_repository import (
    InMemoryItemCatalogRepository,
)
from storefront_catalog.domain.catalog_profile import DEFAULT_PROFILES
from storefront_catalog.domain.errors import NotFoundError, ValidationError
from storefront_catalog.domain.item import Item
from storefront_catalog.ports.notifier import NotificationKind, Notifier
from storefront_catalog.use_cases.add_item_to_cart import (
    AddItemToCart,
    AddItemToCartRequest,
)
from storefront_catalog.use_cases.get_item_by_id import GetItemById
from storefront_catalog.use_cases.load_catalog import CatalogLoader

ItemFactory = Callable[..., Item]


@pytest.fixture()
def cart_store() -> InMemoryCartStore:
    return InMemoryCartStore()


@pytest.fixture()
def notifier() -> Mock:
    return Mock(spec=Notifier)


@pytest.fixture()
def use_case(
    make_item: ItemFactory, cart_store: InMemoryCartStore, notifier: Mock
) -> AddItemToCart:
    repository = InMemoryItemCatalogRepository(
        {
            "physical": [
                make_item("p-1", name="Soundbar"),
                make_item("p-2", name="Turntable", in_stock=False),
            ]
        }
    )
    get_item_by_id = GetItemById(CatalogLoader(repository, DEFAULT_PROFILES))
    return AddItemToCart(get_item_by_id, cart_store, notifier)


def test_adds_item_and_notifies_success(
    use_case: AddItemToCart, cart_store: InMemoryCartStore, notifier: Mock
) -> None:
    result = use_case.execute(
        AddItemToCartRequest(session_id="s1", catalog="physical", item_id="p-1")
    )

    assert [(line.item.id, line.quantity) for line in result.lines] == [("p-1", 1)]
    assert cart_store.get("s1").contains("p-1")
    notifier.notify.assert_called_once_with(
        NotificationKind.SUCCESS, "Added", "Soundbar added to cart"
    )


def test_adding_twice_increments_quantity(use_case: AddItemToCart) -> None:
    request = AddItemToCartRequest(session_id="s1", catalog="physical", item_id="p-1")

    use_case.execute(request)
    result = use_case.execute(request)

    assert [line.quantity for line in result.lines] == [2]


def test_carts_are_per_session(use_case: AddItemToCart, cart_store: InMemoryCartStore) -> None:
    use_case.execute(AddItemToCartRequest(session_id="s1", catalog="physical", item_id="p-1"))

    assert not cart_store.get("s2").contains("p-1")


def test_out_of_stock_item_is_rejected(
    use_case: AddItemToCart, cart_store: InMemoryCartStore, notifier: Mock
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(
            AddItemToCartRequest(session_id="s1", catalog="physical", item_id="p-2")
        )

    assert exc_info.value.errors is not None
    assert exc_info.value.errors[0]["code"] == "OUT_OF_STOCK"
    assert cart_store.get("s1").lines() == []
    notifier.notify.assert_called_once_with(
        NotificationKind.ERROR, "Unavailable", "Turntable is out of stock"
    )


def test_missing_item_raises_not_found_without_notifying(
    use_case: AddItemToCart, notifier: Mock
) -> None:
    with pytest.raises(NotFoundError):
        use_case.execute(
            AddItemToCartRequest(session_id="s1", catalog="physical", item_id="p-404")
        )

    notifier.notify.assert_not_called()
