"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from orderdesk.db.schema import Order
from orderdesk.models.domain import OrderEntity, OrderInput

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _order_to_entity(order: Order) -> OrderEntity:
    """Convert SQLAlchemy Order to domain entity."""
    return OrderEntity(
        id=order.id,
        product=order.product,
        qty=order.qty,
        price=order.price,
    )


def _product_filter(stmt, product: str | None):
    """Apply a substring match on product when a filter is given."""
    if product:
        stmt = stmt.where(Order.product.like(f"%{product}%"))
    return stmt


# ============================================================================
# Order Repository
# ============================================================================


def get_all_orders(session: DbSession) -> list[OrderEntity]:
    """Get every order, ordered by id."""
    orders = session.scalars(select(Order).order_by(Order.id)).all()
    return [_order_to_entity(o) for o in orders]


def get_order(session: DbSession, order_id: int) -> OrderEntity | None:
    """Get order by ID."""
    order = session.get(Order, order_id)
    return _order_to_entity(order) if order else None


def get_orders_with_filters(
    session: DbSession,
    product: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> list[OrderEntity]:
    """Get orders whose product contains `product`, ordered by id.

    A falsy limit or offset (None or 0) is not applied.
    """
    stmt = _product_filter(select(Order), product).order_by(Order.id)

    if limit:
        stmt = stmt.limit(limit)
    if offset:
        stmt = stmt.offset(offset)

    orders = session.scalars(stmt).all()
    return [_order_to_entity(o) for o in orders]


def count_orders(session: DbSession, product: str | None = None) -> int:
    """Count orders whose product contains `product`."""
    stmt = _product_filter(select(func.count()).select_from(Order), product)
    return session.scalar(stmt) or 0


def create_order(session: DbSession, order_input: OrderInput) -> OrderEntity:
    """Insert an order and return it with its assigned id.

    Flushes but does not commit; the caller owns the transaction.
    """
    order = Order(
        product=order_input.product,
        qty=order_input.qty,
        price=order_input.price,
    )
    session.add(order)
    session.flush()
    return _order_to_entity(order)


def delete_order(session: DbSession, order_id: int) -> bool:
    """Delete order by ID. Returns False if it did not exist."""
    order = session.get(Order, order_id)
    if order is None:
        return False
    session.delete(order)
    return True


def delete_all_orders(session: DbSession) -> int:
    """Delete every order. Returns the number of rows removed."""
    return session.query(Order).delete()


def commit(session: DbSession) -> None:
    """Commit the current transaction."""
    session.commit()
