"""Tests for catalog product registration and lookup."""

import uuid

import pytest
from sqlalchemy.orm import Session

from order_service import models
from order_service.application.catalog.services.product_lookup_service import (
    ProductLookupService,
)
from order_service.application.catalog.use_cases.catalog_use_case import CatalogUseCase
from order_service.domain.common.exceptions import ValidationError as DomainValidationError
from order_service.domain.common.value_objects import ProductId
from order_service.exceptions import ProductNotFoundError
from order_service.infrastructure.catalog.repositories import ProductRepository
from order_service.schemas import ProductCreateRequest


class TestRegisterProduct:
    def test_register_product_success(
        self, catalog_use_case: CatalogUseCase, db_session: Session
    ) -> None:
        response = catalog_use_case.register_product(
            ProductCreateRequest(
                name="  Ethiopia Yirgacheffe ",
                category="COFFEE_BEAN_PACKAGE",
                price=7000,
                description="Light roast",
            )
        )

        assert response.name == "Ethiopia Yirgacheffe"
        assert response.price == 7000
        assert response.created_at is not None

        db_product = db_session.get(models.Product, response.product_id)
        assert db_product is not None
        assert db_product.description == "Light roast"

    def test_register_product_negative_price(
        self, catalog_use_case: CatalogUseCase, db_session: Session
    ) -> None:
        with pytest.raises(DomainValidationError):
            catalog_use_case.register_product(
                ProductCreateRequest(name="Decaf", category="COFFEE_BEAN_PACKAGE", price=-1)
            )

        assert db_session.query(models.Product).count() == 0


class TestGetProduct:
    def test_get_product_success(
        self, catalog_use_case: CatalogUseCase, columbia_beans: models.Product
    ) -> None:
        response = catalog_use_case.get_product(columbia_beans.id)

        assert response.product_id == columbia_beans.id
        assert response.name == columbia_beans.name

    def test_get_product_not_found(self, catalog_use_case: CatalogUseCase) -> None:
        missing_id = uuid.uuid4()

        with pytest.raises(ProductNotFoundError) as exc_info:
            catalog_use_case.get_product(missing_id)

        assert exc_info.value.product_ids == [missing_id]

    def test_list_products(
        self,
        catalog_use_case: CatalogUseCase,
        columbia_beans: models.Product,
        brazil_beans: models.Product,
    ) -> None:
        names = [p.name for p in catalog_use_case.list_products()]

        assert names == sorted([columbia_beans.name, brazil_beans.name])


class TestProductLookupService:
    def test_get_by_ids_skips_unknown(
        self,
        db_session: Session,
        columbia_beans: models.Product,
        brazil_beans: models.Product,
    ) -> None:
        service = ProductLookupService(ProductRepository(db_session))

        products = service.get_by_ids(
            [ProductId(columbia_beans.id), ProductId(uuid.uuid4()), ProductId(brazil_beans.id)]
        )

        assert {p.id.value for p in products} == {columbia_beans.id, brazil_beans.id}

    def test_get_by_ids_empty(self, db_session: Session) -> None:
        service = ProductLookupService(ProductRepository(db_session))

        assert service.get_by_ids([]) == []
