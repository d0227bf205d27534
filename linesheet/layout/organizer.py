"""
Product Organizer

Groups a flat product list into categories, and by material inside each
category, for line sheet display.

Categories appear in the order their key is first seen in the input.
Products inside a category are ordered by code (case-sensitive, stable),
so products sharing a code keep their input order.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence, Tuple

from ..common.formatting import format_category_name
from ..models import CatalogSummary, CategoryGroup, Product
from .errors import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrganizedCatalog:
    """Result of organize(): category groups plus their summary."""
    categories: Tuple[CategoryGroup, ...]
    summary: CatalogSummary


def organize(
    products: Sequence[Product],
    display_names: Optional[Mapping[str, str]] = None,
) -> OrganizedCatalog:
    """
    Organize products by category and material.

    Args:
        products: Products to organize (already filtered by the caller)
        display_names: Extra category display names (see format_category_name)

    Returns:
        OrganizedCatalog with code-ordered category groups

    Raises:
        InvalidInputError: If products is not a list or tuple
    """
    if not isinstance(products, (list, tuple)):
        raise InvalidInputError(
            f"Expected a list of products, got {type(products).__name__}"
        )

    groups: Dict[str, CategoryGroup] = {}
    for product in products:
        key = product.category_key
        group = groups.get(key)
        if group is None:
            group = CategoryGroup(key, display_name=format_category_name(key, display_names))
            groups[key] = group
        group.add(product)

    categories = tuple(groups.values())
    logger.debug("Organized %d product(s) into %d categories", len(products), len(categories))
    return OrganizedCatalog(categories=categories, summary=CatalogSummary(categories))
