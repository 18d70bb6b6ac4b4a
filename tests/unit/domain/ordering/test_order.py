from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from order_service.domain.common.exceptions import ValidationError
from order_service.domain.common.value_objects import OrderId
from order_service.domain.ordering.entities import Order, OrderStatus


def test_create_order() -> None:
    """Test a new order is PLACED with a generated UUID and a UTC timestamp."""
    order = Order.create(
        email=" customer@example.com ", address="123 Teheran-ro", postcode="06234"
    )

    assert isinstance(order.id.value, UUID)
    assert order.email == "customer@example.com"
    assert order.status == OrderStatus.PLACED
    assert order.created_at.tzinfo is not None


@pytest.mark.parametrize("field", ["email", "address", "postcode"])
def test_blank_contact_fields_rejected(field: str) -> None:
    values = {"email": "customer@example.com", "address": "123 Teheran-ro", "postcode": "06234"}
    values[field] = "  "

    with pytest.raises(ValidationError) as exc_info:
        Order.create(**values)

    assert exc_info.value.field == field


def test_create_with_id() -> None:
    """Test reconstituting a shipped order from persistence."""
    now = datetime.now(UTC)
    order_id = OrderId(uuid4())
    order = Order.create_with_id(
        id=order_id,
        email="customer@example.com",
        address="123 Teheran-ro",
        postcode="06234",
        status=OrderStatus.SHIPPED,
        created_at=now,
        updated_at=now,
    )

    assert order.id == order_id
    assert order.status == OrderStatus.SHIPPED


def test_order_id_parse() -> None:
    raw = uuid4()

    assert OrderId.parse(str(raw)) == OrderId(raw)
    assert OrderId.parse(raw) == OrderId(raw)
    with pytest.raises(ValueError, match="Invalid OrderId"):
        OrderId.parse("not-a-uuid")
