from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Iterable

from storefront_catalog.domain.item import PageState
from storefront_catalog.domain.pagination import (
    COMPACT_WINDOW,
    NARROW_WINDOW,
    PageWindowPolicy,
)


@dataclass(frozen=True, slots=True)
class CatalogProfile:
    """
    Parameters of one catalog view.

    A single engine serves every catalog; the differences between product
    lines live here.
    """

    name: str
    page_size: int
    price_max_fallback: Decimal
    tie_break_shuffle: bool = False
    shuffle_seed: int | None = None
    window: PageWindowPolicy = NARROW_WINDOW

    def validate(self) -> None:
        """
        Raises:
            PagingValidationError: If page_size is out of range
            WindowValidationError: If the window policy is invalid
        """
        PageState(page_size=self.page_size).validate()
        self.window.validate()

    def random(self, item_ids: Iterable[str] = ()) -> random.Random | None:
        """Shuffler for the default ordering, or None when shuffling is off.

        Without a configured seed the seed is derived from the ordered item
        ids, so one collection always yields the same tie order and every
        page of it is cut from the same ordering.
        """
        if not self.tie_break_shuffle:
            return None
        if self.shuffle_seed is not None:
            return random.Random(self.shuffle_seed)
        digest = hashlib.sha256("\n".join(item_ids).encode()).hexdigest()
        return random.Random(int(digest[:16], 16))

    def with_overrides(self, **changes: object) -> CatalogProfile:
        return replace(self, **changes)  # type: ignore[arg-type]


DIGITAL = CatalogProfile(
    name="digital",
    page_size=10,
    price_max_fallback=Decimal("1000"),
    tie_break_shuffle=False,
    window=COMPACT_WINDOW,
)

PHYSICAL = CatalogProfile(
    name="physical",
    page_size=12,
    price_max_fallback=Decimal("1000000"),
    tie_break_shuffle=True,
    window=NARROW_WINDOW,
)

DEFAULT_PROFILES: dict[str, CatalogProfile] = {
    DIGITAL.name: DIGITAL,
    PHYSICAL.name: PHYSICAL,
}
