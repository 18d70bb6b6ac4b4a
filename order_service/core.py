from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from order_service.application.catalog.services.product_lookup_service import (
    ProductLookupService,
)
from order_service.application.catalog.use_cases.catalog_use_case import CatalogUseCase
from order_service.application.ordering.services.order_item_service import OrderItemService
from order_service.application.ordering.use_cases.order_use_case import OrderUseCase
from order_service.infrastructure.catalog.repositories import ProductRepository
from order_service.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from order_service.infrastructure.ordering.repositories import (
    OrderItemRepository,
    OrderRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Transaction boundary shared by everything built for one session
    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Repositories
    order_repository = providers.Factory(OrderRepository, db=db)
    order_item_repository = providers.Factory(OrderItemRepository, db=db)
    product_repository = providers.Factory(ProductRepository, db=db)

    # Collaborating services
    product_lookup_service = providers.Factory(
        ProductLookupService,
        product_repository=product_repository,
    )
    order_item_service = providers.Factory(
        OrderItemService,
        order_item_repository=order_item_repository,
    )

    # Catalog module, application use cases
    catalog_use_case = providers.Factory(
        CatalogUseCase,
        product_repository=product_repository,
        unit_of_work=unit_of_work,
    )

    # Ordering module, application use cases
    order_use_case = providers.Factory(
        OrderUseCase,
        order_repository=order_repository,
        product_lookup_service=product_lookup_service,
        order_item_service=order_item_service,
        unit_of_work=unit_of_work,
    )


# Initialize container
container = Container()
