"""Order use cases: create, delete, list.

Handles validation and transaction boundaries.
Database operations go through repo.
"""

from __future__ import annotations

import logging
from typing import Any

from orderdesk.db import repo
from orderdesk.db.repo import DbSession
from orderdesk.models.domain import OrderEntity
from orderdesk.models.types import OrderDetail, OrderPage
from orderdesk.orders.validation import ensure_valid_order

logger = logging.getLogger(__name__)


class OrderNotFoundError(LookupError):
    """Raised when an order id does not exist."""

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order not found: {order_id}")


def to_detail(order: OrderEntity) -> OrderDetail:
    """Convert OrderEntity to OrderDetail."""
    return OrderDetail(
        id=order.id,
        product=order.product,
        qty=order.qty,
        price=order.price,
    )


def create_order(session: DbSession, data: Any) -> OrderEntity:
    """Validate and persist a new order.

    Args:
        session: Database session.
        data: Untyped request body.

    Returns:
        The stored order with its assigned id.

    Raises:
        OrderValidationError: If data is invalid.
    """
    order_input = ensure_valid_order(data)

    order = repo.create_order(session, order_input)
    repo.commit(session)

    logger.info(f"Created order {order.id}: {order.product} x{order.qty} @ {order.price}")
    return order


def get_order(session: DbSession, order_id: int) -> OrderEntity:
    """Get an order or raise OrderNotFoundError."""
    order = repo.get_order(session, order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


def delete_order(session: DbSession, order_id: int) -> bool:
    """Delete an order.

    Returns:
        True if the order existed and was removed.
    """
    deleted = repo.delete_order(session, order_id)
    if not deleted:
        return False

    repo.commit(session)
    logger.info(f"Deleted order {order_id}")
    return True


def list_orders(
    session: DbSession,
    product: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> OrderPage:
    """List orders matching a product substring, paginated.

    Args:
        session: Database session.
        product: Substring to match against product names (LIKE).
        limit: Maximum rows to return; None or 0 returns all.
        offset: Rows to skip; None or 0 skips none.

    Returns:
        OrderPage with the page of orders and the unpaginated match count.
    """
    orders = repo.get_orders_with_filters(session, product, limit, offset)
    total_count = repo.count_orders(session, product)

    return OrderPage(
        orders=[to_detail(o) for o in orders],
        total_count=total_count,
        limit=limit,
        offset=offset,
    )
