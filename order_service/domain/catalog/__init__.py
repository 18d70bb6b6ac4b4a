"""Catalog domain module."""

from .entities.product import Product

__all__ = ["Product"]
