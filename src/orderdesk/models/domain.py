"""Domain models for Orderdesk.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and used throughout
the application for clean separation from the database layer.
"""

from __future__ import annotations

from dataclasses import dataclass


# ============================================================================
# Order Domain
# ============================================================================


@dataclass(frozen=True)
class OrderEntity:
    """Domain model for a stored order."""

    id: int
    product: str
    qty: int
    price: float

    @property
    def line_value(self) -> float:
        """Value of the order line (qty * price)."""
        return self.qty * self.price


@dataclass(frozen=True)
class OrderInput:
    """Validated order data ready for insertion."""

    product: str
    qty: int
    price: float
