"""Tests for domain and API models.

Tests validate:
1. camelCase wire names for API models
2. Construction by Python field name
3. Frozen summary and order entities
"""

import dataclasses

import pytest
from pydantic import ValidationError

from orderdesk.models.domain import OrderEntity
from orderdesk.models.types import OrderDetail, OrderPage, OrderSummary


class TestOrderSummary:
    """Test OrderSummary model."""

    def test_serializes_camel_case(self):
        summary = OrderSummary(
            total_revenue=3625.0,
            median_order_price=600.0,
            top_product_by_qty="Mouse",
            unique_product_count=4,
        )

        assert summary.model_dump(by_alias=True) == {
            "totalRevenue": 3625.0,
            "medianOrderPrice": 600.0,
            "topProductByQty": "Mouse",
            "uniqueProductCount": 4,
        }

    def test_accepts_wire_names(self):
        summary = OrderSummary.model_validate(
            {
                "totalRevenue": 1,
                "medianOrderPrice": 1,
                "topProductByQty": "Pen",
                "uniqueProductCount": 1,
            }
        )
        assert summary.top_product_by_qty == "Pen"

    def test_is_frozen(self):
        summary = OrderSummary(
            total_revenue=0,
            median_order_price=0,
            top_product_by_qty="",
            unique_product_count=0,
        )
        with pytest.raises(ValidationError):
            summary.total_revenue = 1


class TestOrderPage:
    """Test OrderPage model."""

    def test_total_count_alias(self):
        page = OrderPage(
            orders=[OrderDetail(id=1, product="Pen", qty=1, price=2.5)],
            total_count=10,
            limit=1,
        )
        data = page.model_dump(by_alias=True)

        assert data["totalCount"] == 10
        assert data["offset"] is None
        assert data["orders"][0]["product"] == "Pen"


class TestOrderEntity:
    """Test OrderEntity dataclass."""

    def test_line_value(self):
        assert OrderEntity(id=1, product="Pen", qty=4, price=2.5).line_value == 10.0

    def test_is_frozen(self):
        order = OrderEntity(id=1, product="Pen", qty=1, price=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.qty = 2
