"""PostgreSQL implementation of ItemCatalogRepository."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront_catalog.domain.item import Item
from storefront_catalog.infra.db.models.item import ItemRow
from storefront_catalog.ports.item_catalog_repository import ItemCatalogRepository


class PostgresItemCatalogRepository(ItemCatalogRepository):
    """
    PostgreSQL implementation of ItemCatalogRepository.

    - Uses SQLAlchemy ORM for database access
    - Loads a whole catalog with a single SELECT (filtering happens in memory)
    - Converts ItemRow (infrastructure) to Item (domain) through
      Item.from_record so NULL columns are coerced like any raw document
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def load_items(self, catalog: str) -> list[Item]:
        """
        Fetch every item of a catalog, ordered by insertion time.

        Args:
            catalog: Catalog name stored in the ``catalog`` column

        Returns:
            Domain items (possibly empty)
        """
        query = (
            select(ItemRow)
            .where(ItemRow.catalog == catalog)
            .order_by(ItemRow.created_at.asc(), ItemRow.id.asc())
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, catalog: str, item_id: str) -> Item | None:
        """
        Get item by ID.

        Args:
            catalog: Catalog name
            item_id: Item ID (expected to be a valid UUID string)

        Returns:
            Item if found, None otherwise
        """
        try:
            key = UUID(item_id)
        except ValueError:  # Invalid UUID format
            return None

        query = select(ItemRow).where(ItemRow.id == key, ItemRow.catalog == catalog)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _to_domain(self, row: ItemRow) -> Item:
        """
        Convert database model (ItemRow) to domain entity (Item).

        Args:
            row: SQLAlchemy ItemRow model

        Returns:
            Item domain entity
        """
        record: dict[str, Any] = {
            "id": str(row.id),  # Convert UUID to string
            "name": row.name,
            "description": row.description,
            "category": row.category,
            "price": row.price,
            "original_price": row.original_price,
            "discount_percent": row.discount_percent,
            "rating": row.rating,
            "review_count": row.review_count,
            "created_at": row.created_at,
            "in_stock": row.in_stock,
            "image_url": row.image_url,
        }
        return Item.from_record(record)
