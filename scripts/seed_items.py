#!/usr/bin/env python3
"""
Seed the items table with deterministic random catalogs.

Features:
- Deterministic: fixed seed -> same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Both catalogs: digital subscriptions and physical goods

Usage:
    python scripts/seed_items.py
"""

from __future__ import annotations

import random
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from storefront_catalog.infra.db.models.item import ItemRow
from storefront_catalog.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_DIGITAL = 40
NUM_PHYSICAL = 60
EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


# ==============================================================================
# Catalog Data
# ==============================================================================

# catalog -> category -> (product names, price band)
CATALOGS = {
    "digital": {
        "video": (["Netflix Premium", "Prime Video", "HBO Max", "Disney+"], (5, 25)),
        "music": (["Spotify Family", "Apple Music", "Tidal HiFi"], (4, 20)),
        "gaming": (["Game Pass Ultimate", "PlayStation Plus", "Nintendo Online"], (8, 60)),
        "tools": (["Canva Pro", "CapCut Pro", "Adobe Express"], (10, 120)),
        "education": (["Duolingo Super", "Coursera Plus"], (10, 400)),
    },
    "physical": {
        "audio": (["Wireless Headphones", "Bluetooth Speaker", "Soundbar"], (30, 700)),
        "wearables": (["Smartwatch", "Fitness Band"], (40, 450)),
        "home": (["Robot Vacuum", "Air Fryer", "Smart Lamp"], (25, 900)),
        "gaming": (["Controller", "Gaming Mouse", "Mechanical Keyboard"], (20, 250)),
    },
}

ADJECTIVES = ["Lite", "Pro", "Max", "Plus", "Mini", "Ultra"]


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_item(catalog: str) -> ItemRow:
    """Generate a single random item of a catalog."""
    category = random.choice(list(CATALOGS[catalog].keys()))
    names, (low, high) = CATALOGS[catalog][category]
    name = f"{random.choice(names)} {random.choice(ADJECTIVES)}"

    original_price = Decimal(random.randint(low, high))
    discount = random.choice([0, 0, 0, 10, 15, 25, 40])
    price = (original_price * (100 - discount) / 100).quantize(Decimal("0.01"))

    return ItemRow(
        catalog=catalog,
        name=name,
        description=f"{name} ({category})",
        category=category,
        price=price,
        original_price=original_price,
        discount_percent=discount,
        rating=round(random.uniform(2.5, 5.0), 1),
        review_count=random.randint(0, 2500),
        in_stock=random.random() > 0.1,
        created_at=EPOCH + timedelta(hours=random.randint(0, 24 * 365)),
        image_url="",
    )


def seed_items(seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with both catalogs.

    Args:
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"Seeding items (seed={seed})...")

    with get_session() as session:
        deleted_count = session.query(ItemRow).delete()
        print(f"   Deleted {deleted_count} existing items")

        items = [generate_item("digital") for _ in range(NUM_DIGITAL)]
        items += [generate_item("physical") for _ in range(NUM_PHYSICAL)]

        session.add_all(items)
        session.flush()

        print(f"Seeded {NUM_DIGITAL} digital and {NUM_PHYSICAL} physical items")
        for item in items[:5]:
            print(f"   [{item.catalog}] {item.name} - ${item.price:,.2f} ({item.category})")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_items()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
