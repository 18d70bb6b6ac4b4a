from .order_use_case import OrderUseCase

__all__ = ["OrderUseCase"]
