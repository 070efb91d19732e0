"""Per-view browse state and its transitions.

    load -> facets seeded -> page 1
    criteria/sort/page-size change -> page reset to 1 -> requery -> paginate
    page change -> paginate (ordered results reused)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from storefront_catalog.domain.catalog_profile import CatalogProfile
from storefront_catalog.domain.catalog_query import QueryResult, query
from storefront_catalog.domain.errors import CatalogNotLoadedError
from storefront_catalog.domain.facets import Facets, derive_facets
from storefront_catalog.domain.item import FilterCriteria, Item, PageState, SortKey
from storefront_catalog.domain.pagination import Page, paginate


@dataclass(frozen=True, slots=True)
class BrowseState:
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    sort_key: SortKey | None = None
    page_size: int = 12
    page: int = 1

    def with_criteria(self, criteria: FilterCriteria) -> BrowseState:
        return replace(self, criteria=criteria, page=1)

    def with_sort_key(self, sort_key: SortKey | None) -> BrowseState:
        return replace(self, sort_key=sort_key, page=1)

    def with_page_size(self, page_size: int) -> BrowseState:
        return replace(self, page_size=page_size, page=1)

    def with_page(self, page: int) -> BrowseState:
        return replace(self, page=page)


class CatalogView:
    """
    One catalog view over a loaded collection.

    Holds the last loaded snapshot and the ordered result of the current
    criteria/sort so that page changes do not requery. Each change fully
    supersedes the previous state (last write wins). Not thread-safe; use one
    view per caller.
    """

    def __init__(self, profile: CatalogProfile) -> None:
        self._profile = profile
        self._items: tuple[Item, ...] | None = None
        self._facets: Facets | None = None
        self._state = BrowseState(page_size=profile.page_size)
        self._results: QueryResult | None = None

    @property
    def profile(self) -> CatalogProfile:
        return self._profile

    @property
    def state(self) -> BrowseState:
        return self._state

    @property
    def loaded(self) -> bool:
        return self._items is not None

    @property
    def facets(self) -> Facets:
        self._require_loaded()
        assert self._facets is not None
        return self._facets

    def load(self, items: Iterable[Item]) -> Page:
        """
        Replace the collection (never merged with a previous one).

        Facets are re-derived and seed the price ceiling; the page resets
        to 1 while search, category, rating and sort are kept.
        """
        self._items = tuple(items)
        self._facets = derive_facets(self._items, self._profile.price_max_fallback)
        criteria = replace(self._state.criteria, price_max=self._facets.max_price)
        self._state = self._state.with_criteria(criteria)
        self._results = None
        return self.render()

    def apply(
        self,
        criteria: FilterCriteria,
        sort_key: SortKey | None,
        page_size: int | None = None,
    ) -> Page:
        """Replace criteria, sort and optionally page size in one transition."""
        state = self._state.with_criteria(criteria).with_sort_key(sort_key)
        if page_size is not None:
            PageState(page_size=page_size).validate()
            state = state.with_page_size(page_size)
        self._state = state
        self._results = None
        return self.render()

    def change_criteria(self, criteria: FilterCriteria) -> Page:
        self._state = self._state.with_criteria(criteria)
        self._results = None
        return self.render()

    def change_sort(self, sort_key: SortKey | None) -> Page:
        self._state = self._state.with_sort_key(sort_key)
        self._results = None
        return self.render()

    def change_page_size(self, page_size: int) -> Page:
        PageState(page_size=page_size).validate()
        self._state = self._state.with_page_size(page_size)
        return self.render()

    def change_page(self, page: int) -> Page:
        self._state = self._state.with_page(page)
        return self.render()

    def render(self) -> Page:
        """Paginate the current ordered results, requerying only if stale."""
        self._require_loaded()
        if self._results is None:
            assert self._items is not None
            self._results = query(
                self._items,
                self._state.criteria,
                self._state.sort_key,
                rng=self._profile.random(item.id for item in self._items),
            )
        return paginate(
            self._results.items,
            self._state.page_size,
            self._state.page,
            self._profile.window,
        )

    def _require_loaded(self) -> None:
        if self._items is None:
            raise CatalogNotLoadedError(catalog=self._profile.name)
