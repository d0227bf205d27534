"""
Data models for line sheet generation.

This module contains data classes with no pipeline logic.
"""

from .catalog import CatalogSummary, CategoryGroup
from .pages import CategoryPage, CoverPage, PageDescriptor, TOCHeading, TOCItem, TOCPage, TOCProductRow
from .product import Product, ProductImage

__all__ = [
    'ProductImage',
    'Product',
    'CategoryGroup',
    'CatalogSummary',
    'TOCHeading',
    'TOCProductRow',
    'TOCItem',
    'CoverPage',
    'TOCPage',
    'CategoryPage',
    'PageDescriptor',
]
