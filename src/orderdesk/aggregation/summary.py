"""Order summary aggregation.

Computes total revenue, median order value, top product by quantity
and distinct product count. Domain logic is pure - database
operations go through repo.
"""

from __future__ import annotations

import logging
from typing import Sequence

from orderdesk.db import repo
from orderdesk.db.repo import DbSession
from orderdesk.models.domain import OrderEntity
from orderdesk.models.types import OrderSummary

logger = logging.getLogger(__name__)

EMPTY_SUMMARY = OrderSummary(
    total_revenue=0,
    median_order_price=0,
    top_product_by_qty="",
    unique_product_count=0,
)


def summarize_all_orders(session: DbSession) -> OrderSummary:
    """Compute the summary over every stored order.

    Args:
        session: Database session.

    Returns:
        OrderSummary for the full order table.
    """
    orders = repo.get_all_orders(session)
    summary = summarize_orders(orders)
    logger.debug(f"Summarized {len(orders)} orders: {summary!r}")
    return summary


def summarize_orders(orders: Sequence[OrderEntity]) -> OrderSummary:
    """Compute aggregate statistics for a sequence of orders.

    Pure function - no database access, input is not mutated.

    Median is taken over per-order line values (qty * price), not unit
    prices. The top product is the one with the largest summed qty;
    groups are scanned in first-occurrence order and a later group only
    takes the lead with a strictly greater total, so on a tie the
    earliest-seen product wins.

    Args:
        orders: Orders in any order, possibly empty.

    Returns:
        OrderSummary; all-zero with an empty product name for no orders.
    """
    if not orders:
        return EMPTY_SUMMARY

    line_values = [order.line_value for order in orders]

    # plain left-to-right fold; sum() compensates float error on 3.12+
    total_revenue = 0
    for value in line_values:
        total_revenue += value

    line_values.sort()
    mid = len(line_values) // 2
    if len(line_values) % 2 == 0:
        median_order_price = (line_values[mid - 1] + line_values[mid]) / 2
    else:
        median_order_price = line_values[mid]

    # dict preserves first-insertion order of products
    qty_by_product: dict[str, int] = {}
    for order in orders:
        qty_by_product[order.product] = qty_by_product.get(order.product, 0) + order.qty

    top_product, top_qty = "", 0
    for product, qty in qty_by_product.items():
        if qty > top_qty:
            top_product, top_qty = product, qty

    return OrderSummary(
        total_revenue=total_revenue,
        median_order_price=median_order_price,
        top_product_by_qty=top_product,
        unique_product_count=len(qty_by_product),
    )
