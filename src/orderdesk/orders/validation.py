"""Order payload validation.

Checks an untyped decoded request body and reports every unmet
constraint at once, so a client can fix all fields in one round trip.
"""

from __future__ import annotations

import math
from typing import Any

from orderdesk.models.domain import OrderInput

PRODUCT_ERROR = "Product is required and must be a non-empty string"
QTY_ERROR = "Quantity is required and must be a positive number"
PRICE_ERROR = "Price is required and must be a positive number"

# SQLite INTEGER is a signed 64-bit value
MAX_QTY = 2**63 - 1


class OrderValidationError(ValueError):
    """Raised when order data violates one or more constraints."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def _is_finite_number(value: Any) -> bool:
    # bool is an int subclass but never a valid quantity or price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int beyond float range; price is stored as REAL
        return False


def validate_order_data(data: Any) -> list[str]:
    """Return the list of violated constraints (empty when valid).

    Args:
        data: Decoded JSON body; anything other than a dict fails every check.

    Returns:
        Error messages in field order: product, qty, price.
    """
    if not isinstance(data, dict):
        data = {}

    errors: list[str] = []

    product = data.get("product")
    if not isinstance(product, str) or not product.strip():
        errors.append(PRODUCT_ERROR)

    qty = data.get("qty")
    if isinstance(qty, bool) or not isinstance(qty, int) or not 0 < qty <= MAX_QTY:
        errors.append(QTY_ERROR)

    price = data.get("price")
    if not _is_finite_number(price) or price <= 0:
        errors.append(PRICE_ERROR)

    return errors


def ensure_valid_order(data: Any) -> OrderInput:
    """Validate data and return a normalized OrderInput.

    Product names are trimmed here, before storage.

    Raises:
        OrderValidationError: If any constraint is violated.
    """
    errors = validate_order_data(data)
    if errors:
        raise OrderValidationError(errors)

    return OrderInput(
        product=data["product"].strip(),
        qty=data["qty"],
        price=float(data["price"]),
    )
