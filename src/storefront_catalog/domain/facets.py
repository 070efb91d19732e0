from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from decimal import ROUND_CEILING, Decimal
from typing import Iterable

from storefront_catalog.domain.item import ALL_CATEGORIES, Item, to_decimal

DEFAULT_PRICE_MAX_FALLBACK = Decimal("1000")
PRICE_BOUND_STEP = Decimal("100")


@dataclass(frozen=True)
class Facets:
    """Derived summary values used to populate filter controls."""

    categories: tuple[str, ...]
    max_price: Decimal
    category_counts: dict[str, int] = field(default_factory=dict)


def round_up_price_bound(price: Decimal) -> Decimal:
    """Round a price up to the next multiple of 100 (733 -> 800, 800 -> 800)."""
    steps = (price / PRICE_BOUND_STEP).to_integral_value(rounding=ROUND_CEILING)
    return steps * PRICE_BOUND_STEP


def derive_facets(
    items: Iterable[Item],
    price_max_fallback: Decimal = DEFAULT_PRICE_MAX_FALLBACK,
) -> Facets:
    """
    Compute the category list and the price ceiling of a collection.

    ``categories`` always starts with the "all" sentinel followed by the
    distinct categories in first-seen order. ``max_price`` is the highest
    price rounded up to a multiple of 100, or the fallback for an empty
    collection.
    """
    items = list(items)
    if not items:
        return Facets(
            categories=(ALL_CATEGORIES,),
            max_price=price_max_fallback,
            category_counts={ALL_CATEGORIES: 0},
        )

    counts = Counter(item.category for item in items)
    # dict.fromkeys keeps first-seen order
    ordered = [c for c in dict.fromkeys(item.category for item in items) if c != ALL_CATEGORIES]

    category_counts = {ALL_CATEGORIES: len(items)}
    category_counts.update((category, counts[category]) for category in ordered)

    highest = max(to_decimal(item.price) for item in items)

    return Facets(
        categories=(ALL_CATEGORIES, *ordered),
        max_price=round_up_price_bound(highest),
        category_counts=category_counts,
    )
