#!/usr/bin/env python3
"""
Seed the Product table with deterministic random connector data.

Features:
- Deterministic: fixed seed → same dataset (ids included) every run
- Idempotent: safe to run multiple times (clears before seeding)
- Realism-lite: pin counts, codings and ratings follow the connector family

Usage:
    python scripts/seed_products.py
"""

from __future__ import annotations

import random
import sys
import uuid
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from parts_catalog.domain.protection import encode_protection
from parts_catalog.infra.db.models.base import Base
from parts_catalog.infra.db.models.product import ProductRow
from parts_catalog.infra.db.session import dispose_engine, get_engine, get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_PRODUCTS = 60  # Number of products to generate


# ==============================================================================
# Connector Catalog Data
# ==============================================================================

# Connector families with the options each one is actually sold in
FAMILIES = {
    "M12": {
        "codes": ["A", "B", "D", "X"],
        "pins": [3, 4, 5, 8, 12],
        "ratings": ["IP67", "IP68"],
        "base_price": Decimal("9.50"),
    },
    "M8": {
        "codes": ["A", "B"],
        "pins": [3, 4],
        "ratings": ["IP67", "IP68"],
        "base_price": Decimal("7.80"),
    },
    "RJ45": {
        "codes": [],
        "pins": [8],
        "ratings": ["IP20", "IP67"],
        "base_price": Decimal("4.20"),
    },
}

GENDERS = ["Male", "Female"]

STYLES = ["straight", "angled", "panel mount", "field wireable", "overmolded cable"]

CABLE_LENGTHS = ["0.5 m", "1 m", "2 m", "5 m", "10 m"]

PLATINGS = ["gold", "nickel", "tin"]

PRICE_TYPES = ["per_unit", "per_unit", "per_pack", "per_bulk"]


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_product(index: int) -> ProductRow:
    """Generate a single random product with plausible connector data."""
    connector_type = random.choice(list(FAMILIES.keys()))
    family = FAMILIES[connector_type]

    code = random.choice(family["codes"]) if family["codes"] else None
    pins = random.choice(family["pins"])
    gender = random.choice(GENDERS)
    style = random.choice(STYLES)

    # One or two ratings, stored through the shared set codec
    ratings = random.sample(family["ratings"], k=random.randint(1, len(family["ratings"])))

    name = f"{connector_type} {pins}-pin {gender.lower()} {style}"
    if code:
        name = f"{connector_type} {code}-coded {pins}-pin {gender.lower()} {style}"

    description = None
    if style == "overmolded cable":
        description = f"PUR cable, {random.choice(CABLE_LENGTHS)}, drag-chain suitable"

    # Price grows with pin count, +/- 15%
    variance = Decimal(str(round(random.uniform(0.85, 1.15), 2)))
    price = (family["base_price"] + Decimal(pins) * Decimal("0.35")) * variance

    in_stock = random.random() < 0.75
    sku = f"{connector_type}-{code or 'N'}{pins}-{gender[0]}-{index:04d}"
    slug = sku.lower()

    return ProductRow(
        # Deterministic ids so cursors stay stable across reseeds
        id=uuid.UUID(int=random.getrandbits(128), version=4),
        sku=sku,
        name=name,
        mpn=f"MPN-{random.randint(100000, 999999)}" if random.random() < 0.6 else None,
        description=description,
        technical_description=f"{pins} contacts, {random.choice(PLATINGS)} plated",
        connector_type=connector_type,
        code=code,
        degree_of_protection=encode_protection(ratings),
        pins=pins,
        gender=gender,
        in_stock=in_stock,
        stock_quantity=random.randint(1, 500) if in_stock else 0,
        price=price.quantize(Decimal("0.01")),
        price_type=random.choice(PRICE_TYPES),
        images=[f"/images/products/{slug}-{n}.jpg" for n in range(1, random.randint(1, 3) + 1)],
        documents=[
            {"url": f"/documents/manuals/{slug}.pdf", "filename": f"{slug}-manual.pdf"}
        ],
        datasheet_url=f"/documents/datasheets/{slug}.pdf",
    )


def seed_products(num_products: int = NUM_PRODUCTS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random product data.

    Args:
        num_products: Number of products to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {num_products} products (seed={seed})...")

    # Development databases only: create the table if it is missing
    Base.metadata.create_all(get_engine())

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing products...")
        deleted_count = session.query(ProductRow).delete()
        print(f"   Deleted {deleted_count} existing products")

        # Step 2: Generate and insert new products
        print(f"🔌 Generating {num_products} products...")
        products = [generate_product(index) for index in range(1, num_products + 1)]

        session.add_all(products)
        session.flush()

        print(f"✅ Successfully seeded {len(products)} products!")

        print("\n📊 Sample products:")
        for i, product in enumerate(products[:5], 1):
            print(
                f"   {i}. {product.sku} {product.name} - "
                f"${product.price:,.2f} ({product.degree_of_protection})"
            )

        if len(products) > 5:
            print(f"   ... and {len(products) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_products()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        dispose_engine()
