"""Filter-sort pipeline for catalog items.

Turns a raw item collection plus filter criteria and a sort key into the
ordered result collection. Pure: no I/O, no state kept between calls.
"""

from __future__ import annotations

import random
import unicodedata
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Iterator

from storefront_catalog.domain.item import (
    ALL_CATEGORIES,
    FilterCriteria,
    Item,
    SortKey,
    to_decimal,
    to_float,
    to_int,
)


@dataclass(frozen=True)
class QueryResult:
    """Ordered items that passed the filters (possibly empty)."""

    items: tuple[Item, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)


# ==============================================================================
# Filtering
# ==============================================================================


def matches(item: Item, criteria: FilterCriteria) -> bool:
    """True when the item satisfies every active predicate (AND semantics)."""
    if criteria.category != ALL_CATEGORIES and item.category != criteria.category:
        return False
    if criteria.price_max is not None and to_decimal(item.price) > criteria.price_max:
        return False
    if to_float(item.rating) < criteria.min_rating:
        return False

    term = criteria.search_term
    if term:
        name = (item.name or "").lower()
        description = (item.description or "").lower()
        if term not in name and term not in description:
            return False
    return True


# ==============================================================================
# Sorting
# ==============================================================================


def _timestamp(item: Item) -> float:
    created_at = item.created_at
    if not isinstance(created_at, datetime):
        return 0.0
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at.timestamp()


def _newest_key(item: Item) -> tuple[bool, float]:
    ts = _timestamp(item)
    # Missing and epoch-zero timestamps sort after every dated item
    return (ts != 0.0, ts)


def _name_key(item: Item) -> tuple[str, str, str]:
    """Locale-aware ordering key: accent-folded, then case-folded, then raw."""
    name = item.name or ""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), name.casefold(), name)


# key function, descending
_SORTS: dict[SortKey, tuple[Callable[[Item], Any], bool]] = {
    SortKey.NEWEST: (_newest_key, True),
    SortKey.PRICE_LOW: (lambda item: to_decimal(item.price), False),
    SortKey.PRICE_HIGH: (lambda item: to_decimal(item.price), True),
    SortKey.RATING: (lambda item: to_float(item.rating), True),
    SortKey.POPULAR: (lambda item: to_int(item.review_count), True),
    SortKey.NAME: (_name_key, False),
}


def sort_items(items: Iterable[Item], sort_key: SortKey | str | None) -> list[Item]:
    """
    Stable sort by exactly one key.

    Items comparing equal keep their input order (``sorted`` is stable, also
    with ``reverse=True``). Unknown keys fall back to newest.
    """
    key = SortKey.parse(sort_key) or SortKey.NEWEST
    key_func, descending = _SORTS[key]
    return sorted(items, key=key_func, reverse=descending)


# ==============================================================================
# Pipeline
# ==============================================================================


def query(
    items: Iterable[Item],
    criteria: FilterCriteria,
    sort_key: SortKey | str | None = None,
    *,
    rng: random.Random | None = None,
) -> QueryResult:
    """
    Filter then sort a collection.

    Args:
        items: Full item collection (already loaded)
        criteria: Active filter state
        sort_key: Explicit ordering; None means the default (newest)
        rng: Optional shuffler applied before the default ordering only, so
            items with equal timestamps come out in random order. Ignored
            when an explicit sort key is given.

    Returns:
        QueryResult with the ordered matches
    """
    filtered = [item for item in items if matches(item, criteria)]

    explicit = SortKey.parse(sort_key)
    if explicit is None and rng is not None:
        rng.shuffle(filtered)

    return QueryResult(items=tuple(sort_items(filtered, explicit)))
