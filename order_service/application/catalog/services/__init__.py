from .product_lookup_service import ProductLookupService

__all__ = ["ProductLookupService"]
