"""Paginator: page clamping, slicing and page-control labels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar, Union

from storefront_catalog.domain.errors import ValidationError

T = TypeVar("T")

ELLIPSIS = "..."

PageLabel = Union[int, str]


class WindowValidationError(ValidationError):
    """Raised when a page window policy is invalid."""

    pass


@dataclass(frozen=True, slots=True)
class PageWindowPolicy:
    """
    How many page buttons to show and whether skipped ranges get markers.

    - visible_window=5, ellipsis=True: narrow window with first/last page
      and "..." markers (large catalogs)
    - visible_window=3, ellipsis=False: fixed compact bar of min(3, total)
      buttons
    """

    visible_window: int = 5
    ellipsis: bool = True

    def validate(self) -> None:
        if self.visible_window < 1:
            raise WindowValidationError("visible_window must be >= 1")


COMPACT_WINDOW = PageWindowPolicy(visible_window=3, ellipsis=False)
NARROW_WINDOW = PageWindowPolicy(visible_window=5, ellipsis=True)


@dataclass(frozen=True)
class Page:
    clamped_page: int
    total_pages: int
    total_count: int
    page_size: int
    items: tuple
    labels: tuple[PageLabel, ...]

    @property
    def has_previous(self) -> bool:
        return self.clamped_page > 1

    @property
    def has_next(self) -> bool:
        return self.clamped_page < self.total_pages


def total_pages_for(count: int, page_size: int) -> int:
    """At least one page, even for an empty result set."""
    return max(1, math.ceil(count / page_size))


def clamp_page(requested_page: int, total_pages: int) -> int:
    return min(max(1, requested_page), total_pages)


def page_window(
    current_page: int,
    total_pages: int,
    policy: PageWindowPolicy = NARROW_WINDOW,
) -> tuple[PageLabel, ...]:
    """
    Compute the page-control labels for a page bar.

    A run of ``visible_window`` consecutive pages is centred on the current
    page and shifted to stay inside 1..total_pages. With the ellipsis policy
    the first and last pages are always reachable: they are added outside the
    run, separated by ELLIPSIS only when pages are actually skipped.

    Examples (visible_window=5, ellipsis):
        page 1 of 10  -> 1 2 3 4 5 ... 10
        page 6 of 10  -> 1 ... 4 5 6 7 8 ... 10
        page 10 of 10 -> 1 ... 6 7 8 9 10

    Examples (visible_window=3, no ellipsis):
        page 1 of 10 -> 1 2 3
        page 5 of 10 -> 4 5 6
        page 10 of 10 -> 8 9 10
    """
    size = min(policy.visible_window, total_pages)
    start = current_page - policy.visible_window // 2
    start = max(1, min(start, total_pages - size + 1))
    end = start + size - 1

    labels: list[PageLabel] = list(range(start, end + 1))
    if not policy.ellipsis:
        return tuple(labels)

    if start > 1:
        head: list[PageLabel] = [1]
        if start > 2:
            head.append(ELLIPSIS)
        labels = head + labels
    if end < total_pages:
        if end < total_pages - 1:
            labels.append(ELLIPSIS)
        labels.append(total_pages)
    return tuple(labels)


def paginate(
    results: Sequence[T],
    page_size: int,
    requested_page: int,
    window: PageWindowPolicy = NARROW_WINDOW,
) -> Page:
    """
    Clamp the requested page and cut the visible slice.

    Precondition: page_size >= 1 (see PageState.validate). Requests below 1
    or past the last page are clamped, never rejected.
    """
    items = tuple(results)
    total_pages = total_pages_for(len(items), page_size)
    page = clamp_page(requested_page, total_pages)
    start = (page - 1) * page_size

    return Page(
        clamped_page=page,
        total_pages=total_pages,
        total_count=len(items),
        page_size=page_size,
        items=items[start : start + page_size],
        labels=page_window(page, total_pages, window),
    )
