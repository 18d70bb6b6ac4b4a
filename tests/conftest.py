"""Pytest configuration and fixtures."""

import uuid
from collections.abc import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from order_service import models
from order_service.application.catalog.use_cases.catalog_use_case import CatalogUseCase
from order_service.application.ordering.use_cases.order_use_case import OrderUseCase
from order_service.core import container
from order_service.database import Base
from order_service.infrastructure.common.di import resolve_use_case

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine; StaticPool keeps one connection so the in-memory database survives
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def order_use_case(db_session: Session) -> OrderUseCase:
    """OrderUseCase wired by the container against the test session."""
    return resolve_use_case(container.order_use_case, db_session)


@pytest.fixture
def catalog_use_case(db_session: Session) -> CatalogUseCase:
    """CatalogUseCase wired by the container against the test session."""
    return resolve_use_case(container.catalog_use_case, db_session)


@pytest.fixture
def columbia_beans(db_session: Session) -> models.Product:
    """Create a coffee bean product."""
    product = models.Product(
        id=uuid.uuid4(),
        name="Columbia Nariñó",
        category="COFFEE_BEAN_PACKAGE",
        price=5000,
        description="Medium roast",
    )
    db_session.add(product)
    db_session.commit()
    db_session.refresh(product)
    return product


@pytest.fixture
def brazil_beans(db_session: Session) -> models.Product:
    """Create a second coffee bean product."""
    product = models.Product(
        id=uuid.uuid4(),
        name="Brazil Serra Do Caparaó",
        category="COFFEE_BEAN_PACKAGE",
        price=6000,
        description=None,
    )
    db_session.add(product)
    db_session.commit()
    db_session.refresh(product)
    return product
