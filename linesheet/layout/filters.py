"""
Product Filters

Selection steps that run before organization. The organizer never
filters on its own, so callers decide which products enter the catalog.
"""

import logging
from typing import List, Sequence

from ..models import Product
from .errors import InvalidInputError

logger = logging.getLogger(__name__)


def filter_active(products: Sequence[Product]) -> List[Product]:
    """
    Keep only products flagged for the line sheet.

    Args:
        products: Products in upstream order

    Returns:
        Active products, input order preserved
    """
    if not isinstance(products, (list, tuple)):
        raise InvalidInputError(
            f"Expected a list of products, got {type(products).__name__}"
        )

    active = [product for product in products if product.active]
    skipped = len(products) - len(active)
    if skipped:
        logger.debug("Filtered out %d inactive product(s)", skipped)
    return active


def sort_products(products: Sequence[Product], sort_by: str = 'sku') -> List[Product]:
    """
    Return products sorted for display (stable).

    Args:
        products: Products to sort
        sort_by: 'sku', 'name', 'price' or 'price-desc'; unknown keys sort by SKU
    """
    if sort_by == 'name':
        return sorted(products, key=lambda p: p.name)
    if sort_by == 'price':
        return sorted(products, key=lambda p: p.wholesale_price)
    if sort_by == 'price-desc':
        return sorted(products, key=lambda p: p.wholesale_price, reverse=True)
    return sorted(products, key=lambda p: p.code)
