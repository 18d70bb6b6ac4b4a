from .product_mapper import ProductMapper

__all__ = ["ProductMapper"]
