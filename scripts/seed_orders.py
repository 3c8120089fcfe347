#!/usr/bin/env python3
"""Seed the orders database with sample data.

Usage:
    python scripts/seed_orders.py

The target database is ORDERDESK_DB_PATH (default data/orders.db).
Existing orders are removed first.

Exit codes:
    0: Database seeded
    1: Seeding failed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from sqlalchemy.exc import SQLAlchemyError  # noqa: E402

from orderdesk.db import repo  # noqa: E402
from orderdesk.db.session import init_db, session_scope  # noqa: E402
from orderdesk.models.domain import OrderInput  # noqa: E402

SAMPLE_ORDERS = [
    OrderInput(product="Laptop", qty=2, price=1200.0),
    OrderInput(product="Mouse", qty=10, price=25.5),
    OrderInput(product="Keyboard", qty=5, price=75.0),
    OrderInput(product="Monitor", qty=3, price=350.0),
    OrderInput(product="Headphones", qty=8, price=45.0),
    OrderInput(product="Webcam", qty=4, price=120.0),
    OrderInput(product="Laptop", qty=1, price=1200.0),
    OrderInput(product="Mouse", qty=15, price=25.5),
]


def seed_database() -> int:
    """Replace all orders with SAMPLE_ORDERS.

    Returns:
        Number of orders inserted.
    """
    init_db()

    with session_scope() as session:
        removed = repo.delete_all_orders(session)
        print(f"Cleared {removed} existing orders")

        for i, order_input in enumerate(SAMPLE_ORDERS, start=1):
            repo.create_order(session, order_input)
            print(
                f"Inserted order {i}: {order_input.product} "
                f"x{order_input.qty} @ ${order_input.price:.2f}"
            )

    return len(SAMPLE_ORDERS)


def main() -> int:
    try:
        count = seed_database()
    except SQLAlchemyError as e:
        print(f"Seeding failed: {e}", file=sys.stderr)
        return 1

    print(f"Database seeded successfully with {count} orders")
    return 0


if __name__ == "__main__":
    sys.exit(main())
