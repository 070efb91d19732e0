from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Callable

import pytest

from storefront_catalog.domain.item import Item

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)

ItemFactory = Callable[..., Item]


@pytest.fixture()
def make_item() -> ItemFactory:
    """Build an Item with sensible defaults; keyword arguments override fields."""

    def factory(id: str = "1", **overrides: Any) -> Item:
        fields: dict[str, Any] = {
            "id": id,
            "name": f"Item {id}",
            "description": "",
            "category": "general",
            "price": Decimal("10"),
            "original_price": Decimal("10"),
            "rating": 3.0,
            "review_count": 0,
            "created_at": BASE_TIME,
        }
        fields.update(overrides)
        return Item(**fields)

    return factory


@pytest.fixture()
def hours() -> Callable[[int], datetime]:
    """Timestamp n hours after the base time."""
    return lambda n: BASE_TIME + timedelta(hours=n)
