"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only process-wide singletons (profiles, cart store, notifier) use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from storefront_catalog.adapters.in_memory_cart import InMemoryCartStore
from storefront_catalog.adapters.logging_notifier import LoggingNotifier
from storefront_catalog.adapters.postgres_item_catalog_repository import (
    PostgresItemCatalogRepository,
)
from storefront_catalog.domain.catalog_profile import CatalogProfile
from storefront_catalog.infra.config import catalog_profiles
from storefront_catalog.infra.db.session import get_session
from storefront_catalog.ports.cart import Cart, CartStore
from storefront_catalog.ports.notifier import Notifier
from storefront_catalog.use_cases.add_item_to_cart import AddItemToCart
from storefront_catalog.use_cases.browse_catalog import BrowseCatalog
from storefront_catalog.use_cases.get_catalog_facets import GetCatalogFacets
from storefront_catalog.use_cases.get_item_by_id import GetItemById
from storefront_catalog.use_cases.load_catalog import CatalogLoader

DEFAULT_SESSION_ID = "anonymous"


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles
    commit on success, rollback on exception and cleanup.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


@lru_cache
def get_catalog_profiles() -> dict[str, CatalogProfile]:
    """Catalog profiles, read from the environment once per process."""
    return catalog_profiles()


@lru_cache
def get_cart_store() -> CartStore:
    """Process-wide cart store (carts live as long as the process)."""
    return InMemoryCartStore()


@lru_cache
def get_notifier() -> Notifier:
    return LoggingNotifier()


def get_session_id(x_session_id: str | None = Header(default=None)) -> str:
    """Shopper session from the X-Session-Id header."""
    if x_session_id is None or not x_session_id.strip():
        return DEFAULT_SESSION_ID
    return x_session_id.strip()


def get_cart(
    session_id: str = Depends(get_session_id),
    cart_store: CartStore = Depends(get_cart_store),
) -> Cart:
    return cart_store.get(session_id)


def get_catalog_loader(
    db: Session = Depends(get_db),
    profiles: dict[str, CatalogProfile] = Depends(get_catalog_profiles),
) -> CatalogLoader:
    """
    Per-request loader over a fresh repository and session.

    Args:
        db: Database session (injected by FastAPI via Depends(get_db))
        profiles: Configured catalog profiles

    Returns:
        CatalogLoader: Loader bound to this request's repository
    """
    repository = PostgresItemCatalogRepository(session=db)
    return CatalogLoader(item_catalog_repository=repository, profiles=profiles)


def get_browse_catalog_use_case(
    loader: CatalogLoader = Depends(get_catalog_loader),
) -> BrowseCatalog:
    return BrowseCatalog(catalog_loader=loader)


def get_catalog_facets_use_case(
    loader: CatalogLoader = Depends(get_catalog_loader),
) -> GetCatalogFacets:
    return GetCatalogFacets(catalog_loader=loader)


def get_get_item_by_id_use_case(
    loader: CatalogLoader = Depends(get_catalog_loader),
) -> GetItemById:
    return GetItemById(catalog_loader=loader)


def get_add_item_to_cart_use_case(
    get_item_by_id: GetItemById = Depends(get_get_item_by_id_use_case),
    cart_store: CartStore = Depends(get_cart_store),
    notifier: Notifier = Depends(get_notifier),
) -> AddItemToCart:
    return AddItemToCart(
        get_item_by_id=get_item_by_id,
        cart_store=cart_store,
        notifier=notifier,
    )
