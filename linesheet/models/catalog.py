"""
Organized catalog models.

CategoryGroup and CatalogSummary hold no counters of their own: every
aggregate is recomputed from the member products when it is read.
"""

from bisect import insort_right
from decimal import Decimal
from operator import attrgetter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..common.formatting import format_category_name
from .product import Product

_by_code = attrgetter("code")


class CategoryGroup:
    """
    Products sharing one category, kept in code order.

    Usage:
        group = CategoryGroup("Rings")
        group.add(product)
        group.by_material["Silver"]  # -> (Product, ...)
    """

    def __init__(self, name: str, display_name: Optional[str] = None,
                 products: Iterable[Product] = ()):
        self.name = name
        self.display_name = display_name or format_category_name(name)
        self._products: List[Product] = []
        for product in products:
            self.add(product)

    def add(self, product: Product) -> None:
        """Insert a product, keeping code order stable for equal codes."""
        if product.category_key != self.name:
            raise ValueError(
                f"Product {product.code} belongs to {product.category_key!r}, not {self.name!r}"
            )
        insort_right(self._products, product, key=_by_code)

    @property
    def products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    @property
    def by_material(self) -> Dict[str, Tuple[Product, ...]]:
        """Material name -> code-ordered products, in first-seen material order."""
        grouped: Dict[str, List[Product]] = {}
        for product in self._products:
            grouped.setdefault(product.material_key, []).append(product)
        return {material: tuple(items) for material, items in grouped.items()}

    @property
    def materials(self) -> List[str]:
        return list(self.by_material)

    @property
    def total_count(self) -> int:
        return len(self._products)

    @property
    def total_wholesale_value(self) -> Decimal:
        return sum((p.wholesale_price for p in self._products), Decimal("0"))

    def __len__(self) -> int:
        return len(self._products)

    def __repr__(self) -> str:
        return f"CategoryGroup({self.name!r}, products={len(self._products)})"


class CatalogSummary:
    """Aggregate figures over a sequence of category groups."""

    def __init__(self, categories: Sequence[CategoryGroup]):
        self._categories = tuple(categories)

    @property
    def total_categories(self) -> int:
        return len(self._categories)

    @property
    def total_products(self) -> int:
        return sum(group.total_count for group in self._categories)

    @property
    def total_wholesale_value(self) -> Decimal:
        return sum((group.total_wholesale_value for group in self._categories), Decimal("0"))

    @property
    def average_wholesale_price(self) -> Decimal:
        total = self.total_products
        if total == 0:
            return Decimal("0")
        return self.total_wholesale_value / total

    def as_dict(self) -> dict:
        """Plain dictionary form, used for reports and JSON output."""
        return {
            'total_categories': self.total_categories,
            'total_products': self.total_products,
            'total_wholesale_value': self.total_wholesale_value,
            'average_wholesale_price': self.average_wholesale_price,
            'category_summary': [
                {
                    'name': group.name,
                    'count': group.total_count,
                    'value': group.total_wholesale_value,
                    'materials': group.materials,
                }
                for group in self._categories
            ],
        }
