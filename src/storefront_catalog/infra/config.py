from __future__ import annotations

import os
from dataclasses import dataclass

from storefront_catalog.domain.catalog_profile import DEFAULT_PROFILES, CatalogProfile


def _int_env(name: str) -> int | None:
    raw = os.getenv(name)

    if raw is None or not raw.strip():
        return None

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} environment variable must be an integer, got {raw!r}")


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


@dataclass(frozen=True, slots=True)
class PoolSettings:
    size: int = 10
    max_overflow: int = 20
    recycle_seconds: int = 3600


def pool_settings() -> PoolSettings:
    """Connection pool sizing (DB_POOL_SIZE, DB_MAX_OVERFLOW, DB_POOL_RECYCLE)."""
    defaults = PoolSettings()
    size = _int_env("DB_POOL_SIZE")
    max_overflow = _int_env("DB_MAX_OVERFLOW")
    recycle = _int_env("DB_POOL_RECYCLE")
    return PoolSettings(
        size=defaults.size if size is None else size,
        max_overflow=defaults.max_overflow if max_overflow is None else max_overflow,
        recycle_seconds=defaults.recycle_seconds if recycle is None else recycle,
    )


def catalog_profiles() -> dict[str, CatalogProfile]:
    """
    Catalog profiles with environment overrides applied.

    - CATALOG_<NAME>_PAGE_SIZE: page size of that catalog
    - CATALOG_SHUFFLE_SEED: seed for catalogs that shuffle their default ordering

    Raises:
        RuntimeError: If an override is not an integer
        ValidationError: If an override produces an invalid profile
    """
    seed = _int_env("CATALOG_SHUFFLE_SEED")
    profiles: dict[str, CatalogProfile] = {}

    for name, profile in DEFAULT_PROFILES.items():
        page_size = _int_env(f"CATALOG_{name.upper()}_PAGE_SIZE")
        if page_size is not None:
            profile = profile.with_overrides(page_size=page_size)
        if seed is not None:
            profile = profile.with_overrides(shuffle_seed=seed)
        profile.validate()
        profiles[name] = profile

    return profiles
