"""Pydantic models for the Orderdesk API.

Field names are snake_case in Python and camelCase on the wire,
matching what the dashboard frontend reads.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model serializing to camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderDetail(ApiModel):
    """Single order for API response."""

    id: int
    product: str
    qty: int
    price: float


class OrderPage(ApiModel):
    """Filtered, paginated slice of orders.

    total_count covers every order matching the filter, ignoring limit/offset.
    """

    orders: list[OrderDetail]
    total_count: int
    limit: int | None = None
    offset: int | None = None


class OrderSummary(ApiModel):
    """Aggregate statistics over a set of orders."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    total_revenue: float
    median_order_price: float
    top_product_by_qty: str
    unique_product_count: int


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses."""

    error: str
    message: str
    details: list[str] | None = None
