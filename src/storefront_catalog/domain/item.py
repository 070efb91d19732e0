from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping

from storefront_catalog.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


ALL_CATEGORIES = "all"
MAX_PAGE_SIZE = 200

_ZERO = Decimal("0")


# ==============================================================================
# Numeric coercion
# ==============================================================================


def to_decimal(value: Any) -> Decimal:
    """
    Coerce a raw amount into a Decimal.

    Missing, non-numeric and non-finite values become 0. Never raises.
    """
    if isinstance(value, bool) or value is None:
        return _ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else _ZERO
    if isinstance(value, float):
        # str() keeps the short repr so 19.99 does not become 19.989999...
        return Decimal(str(value)) if math.isfinite(value) else _ZERO
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return _ZERO
    return result if result.is_finite() else _ZERO


def to_float(value: Any) -> float:
    """Coerce a raw number into a finite float, 0.0 otherwise."""
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    return result if math.isfinite(result) else 0.0


def to_int(value: Any) -> int:
    """Coerce a raw count into an int, 0 otherwise. Fractions are truncated."""
    return int(to_float(value))


def to_datetime(value: Any) -> datetime | None:
    """
    Coerce a raw timestamp.

    Accepts datetimes, ISO-8601 strings and epoch seconds. Anything else is
    treated as missing.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    return None


# ==============================================================================
# Values
# ==============================================================================


@dataclass(frozen=True)
class Item:
    id: str
    name: str
    description: str
    category: str
    price: Decimal
    original_price: Decimal
    discount_percent: int = 0
    rating: float = 0.0
    review_count: int = 0
    created_at: datetime | None = None
    in_stock: bool = True
    image_url: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Item:
        """
        Build an Item from a raw catalog document.

        Accepts both the document field names (``reviews``, ``discount``,
        ``originalPrice``, ``inStock``, ``createdAt``, ``imageUrl``) and the
        snake_case attribute names. Corrupt values degrade to defaults instead
        of raising.
        """

        def pick(*keys: str) -> Any:
            for key in keys:
                if record.get(key) is not None:
                    return record[key]
            return None

        price = to_decimal(pick("price"))
        raw_original = pick("original_price", "originalPrice")

        return cls(
            id=str(pick("id") or ""),
            name=str(pick("name") or "Product"),
            description=str(pick("description") or ""),
            category=str(pick("category") or "general"),
            price=price,
            original_price=price if raw_original is None else to_decimal(raw_original),
            discount_percent=min(max(to_int(pick("discount_percent", "discount")), 0), 100),
            rating=to_float(pick("rating")),
            review_count=to_int(pick("review_count", "reviews")),
            created_at=to_datetime(pick("created_at", "createdAt")),
            in_stock=pick("in_stock", "inStock") is not False,
            image_url=str(pick("image_url", "imageUrl") or ""),
        )


class SortKey(str, Enum):
    NEWEST = "newest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"
    POPULAR = "popular"
    NAME = "name"

    @classmethod
    def parse(cls, value: str | SortKey | None) -> SortKey | None:
        """
        Parse a raw sort value.

        Returns None when no sort was requested. Unknown values fail closed
        to NEWEST.
        """
        if isinstance(value, SortKey):
            return value
        if value is None or not value.strip():
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.NEWEST


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    search_text: str = ""
    category: str = ALL_CATEGORIES
    price_max: Decimal | None = None  # None means unbounded; normally seeded from facets
    min_rating: float = 0.0

    @property
    def search_term(self) -> str:
        """Trimmed, lowercased search text ("" when there is nothing to match)."""
        return self.search_text.strip().lower()


@dataclass(frozen=True, slots=True)
class PageState:
    page_size: int
    requested_page: int = 1

    def validate(self) -> None:
        """
        Validate paging parameters.

        ``requested_page`` is user intent and is clamped by the paginator,
        never rejected.

        Raises:
            PagingValidationError: If page_size is out of range
        """
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0")
        if self.page_size > MAX_PAGE_SIZE:
            raise PagingValidationError(f"page_size must be <= {MAX_PAGE_SIZE}")
