import pytest

from order_service.domain.catalog.entities.product import Product
from order_service.domain.common.exceptions import ValidationError


def test_create_product() -> None:
    """Test creating a product strips text fields and generates an id."""
    product = Product.create(
        name="  Columbia Quindío ",
        category=" COFFEE_BEAN_PACKAGE",
        price=5500,
        description="  Dark roast  ",
    )

    assert product.name == "Columbia Quindío"
    assert product.category == "COFFEE_BEAN_PACKAGE"
    assert product.description == "Dark roast"
    assert product.id.value is not None


def test_create_generates_distinct_ids() -> None:
    first = Product.create(name="A", category="BEANS", price=1)
    second = Product.create(name="A", category="BEANS", price=1)

    assert first.id != second.id


def test_blank_name_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Product.create(name="   ", category="BEANS", price=100)

    assert exc_info.value.field == "name"


def test_negative_price_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Product.create(name="Decaf", category="BEANS", price=-10)

    assert exc_info.value.field == "price"
    assert exc_info.value.value == -10
