"""Tests for the order repository and service layer.

Filtering uses a LIKE substring match; limit/offset of None or 0
are not applied, and total_count ignores pagination.
"""

import pytest

from orderdesk.db import repo
from orderdesk.db.schema import Order
from orderdesk.models.domain import OrderEntity, OrderInput
from orderdesk.orders import service
from orderdesk.orders.validation import OrderValidationError


@pytest.fixture
def seeded(session):
    """Six orders across four products."""
    session.add_all(
        [
            Order(product="Laptop", qty=2, price=1200.0),
            Order(product="Mouse", qty=10, price=25.5),
            Order(product="Keyboard", qty=5, price=75.0),
            Order(product="Gaming Mouse", qty=1, price=60.0),
            Order(product="Monitor", qty=3, price=350.0),
            Order(product="Laptop", qty=1, price=1200.0),
        ]
    )
    session.commit()
    return session


class TestRepository:
    """Direct repository queries."""

    def test_get_all_orders_ordered_by_id(self, seeded):
        orders = repo.get_all_orders(seeded)

        assert [o.id for o in orders] == [1, 2, 3, 4, 5, 6]
        assert all(isinstance(o, OrderEntity) for o in orders)

    def test_get_order(self, seeded):
        assert repo.get_order(seeded, 2) == OrderEntity(id=2, product="Mouse", qty=10, price=25.5)

    def test_get_missing_order(self, seeded):
        assert repo.get_order(seeded, 999) is None

    def test_product_filter_is_substring(self, seeded):
        orders = repo.get_orders_with_filters(seeded, product="Mouse")
        assert [o.product for o in orders] == ["Mouse", "Gaming Mouse"]

    def test_limit_and_offset(self, seeded):
        orders = repo.get_orders_with_filters(seeded, limit=2, offset=1)
        assert [o.id for o in orders] == [2, 3]

    def test_offset_without_limit(self, seeded):
        orders = repo.get_orders_with_filters(seeded, offset=4)
        assert [o.id for o in orders] == [5, 6]

    def test_zero_limit_returns_everything(self, seeded):
        assert len(repo.get_orders_with_filters(seeded, limit=0)) == 6

    def test_count_with_filter(self, seeded):
        assert repo.count_orders(seeded) == 6
        assert repo.count_orders(seeded, "Laptop") == 2
        assert repo.count_orders(seeded, "Tablet") == 0

    def test_create_assigns_id(self, seeded):
        order = repo.create_order(seeded, OrderInput(product="Webcam", qty=4, price=120.0))
        assert order.id == 7

    def test_delete_all(self, seeded):
        assert repo.delete_all_orders(seeded) == 6
        assert repo.count_orders(seeded) == 0


class TestCreateOrder:
    """service.create_order validates, trims and persists."""

    def test_creates_and_commits(self, session):
        order = service.create_order(session, {"product": " Headphones ", "qty": 8, "price": 45})

        assert order.id > 0
        assert order.product == "Headphones"
        assert order.price == 45.0
        stored = session.get(Order, order.id)
        assert stored is not None
        assert stored.product == "Headphones"

    def test_invalid_data_not_persisted(self, session):
        with pytest.raises(OrderValidationError):
            service.create_order(session, {"product": "", "qty": 1, "price": 1})

        assert repo.count_orders(session) == 0


class TestDeleteOrder:
    """service.delete_order removes existing rows."""

    def test_deletes_existing(self, seeded):
        assert service.delete_order(seeded, 3) is True
        assert repo.get_order(seeded, 3) is None
        assert repo.count_orders(seeded) == 5

    def test_missing_returns_false(self, seeded):
        assert service.delete_order(seeded, 42) is False
        assert repo.count_orders(seeded) == 6


class TestGetOrder:
    """service.get_order raises for unknown ids."""

    def test_not_found(self, session):
        with pytest.raises(service.OrderNotFoundError) as exc_info:
            service.get_order(session, 5)

        assert exc_info.value.order_id == 5


class TestListOrders:
    """service.list_orders builds an OrderPage."""

    def test_page_with_total_count(self, seeded):
        page = service.list_orders(seeded, product="a", limit=2)

        # Laptop, Keyboard, Gaming Mouse, Laptop contain "a"
        assert page.total_count == 4
        assert [o.product for o in page.orders] == ["Laptop", "Keyboard"]
        assert page.limit == 2
        assert page.offset is None

    def test_no_filters(self, seeded):
        page = service.list_orders(seeded)
        assert page.total_count == 6
        assert len(page.orders) == 6
