"""
Test suite for BrowseCatalog use case.

Runs the real engine over an in-memory catalog. Verifies:
- Criteria, sort and page state flow into the visible page
- The price ceiling is seeded from facets when not supplied
- Requested pages are clamped, never rejected
- Loader failures propagate as domain errors
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Callable
from unittest.mock import Mock

import pytest

from storefront_catalog.adapters.in_memory_item_catalog_repository import (
    InMemoryItemCatalogRepository,
)
from storefront_catalog.domain.catalog_profile import DEFAULT_PROFILES, DIGITAL, PHYSICAL
from storefront_catalog.domain.errors import CatalogUnavailableError, NotFoundError
from storefront_catalog.domain.item import Item, PagingValidationError, SortKey
from storefront_catalog.domain.pagination import PageWindowPolicy, WindowValidationError
from storefront_catalog.ports.item_catalog_repository import ItemCatalogRepository
from storefront_catalog.use_cases.browse_catalog import (
    BrowseCatalog,
    BrowseCatalogRequest,
    BrowseCatalogResponse,
)
from storefront_catalog.use_cases.load_catalog import CatalogLoader

ItemFactory = Callable[..., Item]

PROFILES = {
    "digital": DIGITAL,
    "physical": replace(PHYSICAL, shuffle_seed=1),
}


def build_use_case(catalogs: dict[str, list[Item]]) -> BrowseCatalog:
    repository = InMemoryItemCatalogRepository(catalogs)
    return BrowseCatalog(CatalogLoader(repository, PROFILES))


# ==============================================================================
# Happy Path Tests
# ==============================================================================


def test_category_filter_excludes_newer_item_of_other_category(
    make_item: ItemFactory, hours: Callable[[int], datetime]
) -> None:
    older = make_item("a1", category="a", created_at=hours(1))
    newer = make_item("b1", category="b", created_at=hours(2))
    use_case = build_use_case({"physical": [older, newer]})

    result = use_case.execute(BrowseCatalogRequest(catalog="physical", category="a"))

    assert isinstance(result, BrowseCatalogResponse)
    assert list(result.page.items) == [older]
    assert result.page.total_pages == 1
    assert result.page.page_size == 12


def test_out_of_range_page_clamps_to_last(make_item: ItemFactory) -> None:
    items = [make_item(str(n), price=Decimal(n)) for n in range(1, 14)]
    use_case = build_use_case({"physical": items})

    result = use_case.execute(
        BrowseCatalogRequest(catalog="physical", sort_key=SortKey.PRICE_LOW, page=5)
    )

    assert result.page.total_pages == 2
    assert result.page.clamped_page == 2
    assert [item.id for item in result.page.items] == ["13"]


def test_price_ceiling_seeded_from_facets(make_item: ItemFactory) -> None:
    items = [make_item("1", price=Decimal("120")), make_item("2", price=Decimal("733"))]
    use_case = build_use_case({"digital": items})

    result = use_case.execute(BrowseCatalogRequest(catalog="digital"))

    assert result.facets.max_price == Decimal("800")
    assert result.criteria.price_max == Decimal("800")
    assert result.page.total_count == 2


def test_explicit_price_ceiling_is_kept(make_item: ItemFactory) -> None:
    items = [make_item("1", price=Decimal("120")), make_item("2", price=Decimal("733"))]
    use_case = build_use_case({"digital": items})

    result = use_case.execute(
        BrowseCatalogRequest(catalog="digital", price_max=Decimal("200"))
    )

    assert result.criteria.price_max == Decimal("200")
    assert [item.id for item in result.page.items] == ["1"]


def test_all_criteria_combine(make_item: ItemFactory) -> None:
    items = [
        make_item("1", name="Studio Monitor", category="audio", price=Decimal("50"), rating=4.5),
        make_item("2", name="Studio Monitor", category="audio", price=Decimal("50"), rating=2.0),
        make_item("3", name="Tripod", category="audio", price=Decimal("50"), rating=4.5),
        make_item("4", name="Studio Monitor", category="video", price=Decimal("50"), rating=4.5),
    ]
    use_case = build_use_case({"digital": items})

    result = use_case.execute(
        BrowseCatalogRequest(
            catalog="digital",
            search_text="monitor",
            category="audio",
            min_rating=4,
        )
    )

    assert [item.id for item in result.page.items] == ["1"]


def test_profile_page_size_and_window_are_used(make_item: ItemFactory) -> None:
    items = [make_item(str(n), price=Decimal(n)) for n in range(1, 101)]
    use_case = build_use_case({"digital": items})

    result = use_case.execute(
        BrowseCatalogRequest(catalog="digital", sort_key=SortKey.PRICE_LOW, page=5)
    )

    assert result.page.page_size == 10
    assert result.page.total_pages == 10
    assert result.page.labels == (4, 5, 6)
    assert result.sort_key is SortKey.PRICE_LOW


def test_request_page_size_overrides_profile(make_item: ItemFactory) -> None:
    items = [make_item(str(n)) for n in range(1, 31)]
    use_case = build_use_case({"physical": items})

    result = use_case.execute(BrowseCatalogRequest(catalog="physical", page_size=5))

    assert result.page.page_size == 5
    assert result.page.total_pages == 6


def test_empty_catalog_reports_single_empty_page() -> None:
    use_case = build_use_case({"physical": []})

    result = use_case.execute(BrowseCatalogRequest(catalog="physical", page=3))

    assert result.page.items == ()
    assert result.page.total_pages == 1
    assert result.facets.max_price == Decimal("1000000")


def test_seeded_default_order_is_reproducible(make_item: ItemFactory) -> None:
    items = [make_item(str(n)) for n in range(1, 25)]
    use_case = build_use_case({"physical": items})

    first = use_case.execute(BrowseCatalogRequest(catalog="physical"))
    second = use_case.execute(BrowseCatalogRequest(catalog="physical"))

    assert first.page.items == second.page.items


def test_physical_pages_cover_tied_items_once_without_seed(
    make_item: ItemFactory, hours: Callable[[int], datetime]
) -> None:
    items = [make_item(str(n), created_at=hours(1)) for n in range(24)]
    repository = InMemoryItemCatalogRepository({"physical": items})
    use_case = BrowseCatalog(CatalogLoader(repository, DEFAULT_PROFILES))

    first = use_case.execute(BrowseCatalogRequest(catalog="physical", page=1))
    second = use_case.execute(BrowseCatalogRequest(catalog="physical", page=2))

    seen = [item.id for item in first.page.items] + [item.id for item in second.page.items]
    assert len(seen) == 24
    assert sorted(seen) == sorted(item.id for item in items)


def test_physical_tie_order_is_stable_across_requests(
    make_item: ItemFactory, hours: Callable[[int], datetime]
) -> None:
    items = [make_item(str(n), created_at=hours(1)) for n in range(24)]
    repository = InMemoryItemCatalogRepository({"physical": items})
    use_case = BrowseCatalog(CatalogLoader(repository, DEFAULT_PROFILES))

    first = use_case.execute(BrowseCatalogRequest(catalog="physical"))
    again = use_case.execute(BrowseCatalogRequest(catalog="physical"))

    assert [item.id for item in first.page.items] == [item.id for item in again.page.items]


# ==============================================================================
# Error Tests
# ==============================================================================


def test_unknown_catalog_raises_not_found() -> None:
    use_case = build_use_case({})

    with pytest.raises(NotFoundError):
        use_case.execute(BrowseCatalogRequest(catalog="vinyl"))


@pytest.mark.parametrize("page_size", [0, 201])
def test_invalid_page_size_raises(page_size: int) -> None:
    use_case = build_use_case({"physical": []})

    with pytest.raises(PagingValidationError):
        use_case.execute(BrowseCatalogRequest(catalog="physical", page_size=page_size))


def test_load_failure_raises_catalog_unavailable() -> None:
    repository = Mock(spec=ItemCatalogRepository)
    repository.load_items.side_effect = TimeoutError("upstream timed out")
    use_case = BrowseCatalog(CatalogLoader(repository, PROFILES))

    with pytest.raises(CatalogUnavailableError):
        use_case.execute(BrowseCatalogRequest(catalog="physical"))


def test_invalid_page_size_checked_before_loading() -> None:
    repository = Mock(spec=ItemCatalogRepository)
    use_case = BrowseCatalog(CatalogLoader(repository, PROFILES))

    with pytest.raises(PagingValidationError):
        use_case.execute(BrowseCatalogRequest(catalog="physical", page_size=0))

    repository.load_items.assert_not_called()


def test_invalid_window_policy_raises() -> None:
    broken = replace(DIGITAL, window=PageWindowPolicy(visible_window=0))
    repository = InMemoryItemCatalogRepository({"digital": []})
    use_case = BrowseCatalog(CatalogLoader(repository, {"digital": broken}))

    with pytest.raises(WindowValidationError):
        use_case.execute(BrowseCatalogRequest(catalog="digital"))
