"""
Table of contents items and page descriptors.

Both are produced fresh by every assembly and are never persisted.
Each variant carries a ``kind`` tag so renderers can dispatch on it.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar, Tuple, Union

from .product import Product


@dataclass(frozen=True)
class TOCHeading:
    """Category heading line in the table of contents."""
    kind: ClassVar[str] = "category"
    category: str
    display_name: str
    page: int
    product_count: int


@dataclass(frozen=True)
class TOCProductRow:
    """Product line in the table of contents; page is where its category starts."""
    kind: ClassVar[str] = "product"
    category: str
    sku: str
    name: str
    material: str
    price: Decimal
    page: int


TOCItem = Union[TOCHeading, TOCProductRow]


@dataclass(frozen=True)
class CoverPage:
    kind: ClassVar[str] = "cover"
    page_number: int = 1


@dataclass(frozen=True)
class TOCPage:
    """One page of the table of contents (index is 1-based)."""
    kind: ClassVar[str] = "toc"
    index: int
    page_number: int
    items: Tuple[TOCItem, ...] = field(default_factory=tuple)

    @property
    def is_continuation(self) -> bool:
        return self.index > 1

    @property
    def title(self) -> str:
        return "Table of Contents (continued)" if self.is_continuation else "Table of Contents"

    @property
    def starts_mid_category(self) -> bool:
        """True when the first item continues a category from the previous page."""
        return bool(self.items) and isinstance(self.items[0], TOCProductRow)


@dataclass(frozen=True)
class CategoryPage:
    """One page of products for a category (section_index is 1-based within the category)."""
    kind: ClassVar[str] = "category"
    category: str
    display_name: str
    section_index: int
    page_number: int
    products: Tuple[Product, ...] = field(default_factory=tuple)


PageDescriptor = Union[CoverPage, TOCPage, CategoryPage]
