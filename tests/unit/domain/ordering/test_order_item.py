import pytest

from order_service.domain.catalog.entities.product import Product
from order_service.domain.common.exceptions import InvariantViolationError
from order_service.domain.ordering.entities import Order, OrderItem


@pytest.fixture
def order() -> Order:
    return Order.create(email="customer@example.com", address="123 Teheran-ro", postcode="06234")


@pytest.fixture
def product() -> Product:
    return Product.create(name="Columbia Nariñó", category="COFFEE_BEAN_PACKAGE", price=5000)


def test_create_item_snapshots_product(order: Order, product: Product) -> None:
    item = OrderItem.create(order=order, product=product, quantity=3)

    assert item.order_id == order.id
    assert item.product_id == product.id
    assert item.category == "COFFEE_BEAN_PACKAGE"
    assert item.price == 5000
    assert item.quantity == 3
    assert item.id.value == 0  # Database assigns real ID


@pytest.mark.parametrize("quantity", [0, -1])
def test_non_positive_quantity_rejected(order: Order, product: Product, quantity: int) -> None:
    with pytest.raises(InvariantViolationError) as exc_info:
        OrderItem.create(order=order, product=product, quantity=quantity)

    assert exc_info.value.aggregate == "OrderItem"
