"""Orders API endpoints.

GET    /api/orders/summary     - Aggregate statistics over all orders
GET    /api/orders             - List orders (product filter, limit/offset)
GET    /api/orders/{order_id}  - Get order detail
POST   /api/orders             - Create order
DELETE /api/orders/{order_id}  - Delete order
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response

from orderdesk.aggregation.summary import summarize_all_orders
from orderdesk.api.app import get_db_session
from orderdesk.db.repo import DbSession
from orderdesk.models.types import OrderDetail, OrderPage, OrderSummary
from orderdesk.orders import service

router = APIRouter()


# Registered before /orders/{order_id} so "summary" is never parsed as an id
@router.get("/orders/summary", response_model=OrderSummary)
def get_orders_summary(
    session: DbSession = Depends(get_db_session),
) -> OrderSummary:
    """Get aggregate statistics over every stored order.

    Args:
        session: Database session (injected).

    Returns:
        OrderSummary serialized with camelCase keys.
    """
    return summarize_all_orders(session)


@router.get("/orders", response_model=OrderPage)
def list_orders(
    product: str | None = Query(None, description="Substring match on product name"),
    limit: int | None = Query(None, ge=0),
    offset: int | None = Query(None, ge=0),
    session: DbSession = Depends(get_db_session),
) -> OrderPage:
    """List orders, optionally filtered and paginated.

    Args:
        product: Product name substring.
        limit: Page size; omitted or 0 returns every match.
        offset: Rows to skip.
        session: Database session (injected).

    Returns:
        OrderPage with orders and the total matching count.
    """
    return service.list_orders(session, product=product, limit=limit, offset=offset)


@router.get("/orders/{order_id}", response_model=OrderDetail)
def get_order(
    order_id: int,
    session: DbSession = Depends(get_db_session),
) -> OrderDetail:
    """Get order detail.

    Raises:
        HTTPException: 404 if order not found.
    """
    try:
        order = service.get_order(session, order_id)
    except service.OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail="Order not found") from e

    return service.to_detail(order)


@router.post("/orders", response_model=OrderDetail, status_code=201)
def create_order(
    payload: Any = Body(None),
    session: DbSession = Depends(get_db_session),
) -> OrderDetail:
    """Create an order.

    The body is validated by the order service rather than a pydantic
    model so every violated field is reported together.

    Raises:
        OrderValidationError: mapped to 400 by the app error handlers.
    """
    order = service.create_order(session, payload)
    return service.to_detail(order)


@router.delete("/orders/{order_id}", status_code=204)
def delete_order(
    order_id: int,
    session: DbSession = Depends(get_db_session),
) -> Response:
    """Delete an order.

    Raises:
        HTTPException: 404 if order not found.
    """
    if not service.delete_order(session, order_id):
        raise HTTPException(status_code=404, detail="Order not found")

    return Response(status_code=204)
