"""
Product data models.

Data classes for product records as they enter the line sheet pipeline.
Grouping keys are derived here so every stage agrees on the defaults.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple

from ..common.constants import DEFAULT_CATEGORY, DEFAULT_MATERIAL


@dataclass(frozen=True)
class ProductImage:
    """Product image with optional pixel dimensions."""
    url: str
    width: Optional[int] = None
    height: Optional[int] = None
    alt_text: str = ""


@dataclass(frozen=True)
class Product:
    """
    A single wholesale product record.

    Products are immutable so page descriptors can hold them without
    aliasing anything a caller might later mutate.

    Field Groups:
    - Identity: code (SKU) and display name
    - Grouping: category and material (empty means "use the default")
    - Pricing: wholesale price, coerced to Decimal
    - Inclusion: active flag (line sheet checkbox)
    - Images: zero or more product photos
    """

    code: str
    name: str = ""
    material: str = ""
    category: str = ""
    wholesale_price: Decimal = Decimal("0")
    active: bool = True
    images: Tuple[ProductImage, ...] = field(default_factory=tuple)
    record_id: str = ""     # Upstream record id, if any

    def __post_init__(self):
        """Validate required fields and normalize the price."""
        if not self.code:
            raise ValueError("Product code is required")

        price = self.wholesale_price
        if price is None or price == "":
            price = Decimal("0")
        if not isinstance(price, Decimal):
            try:
                price = Decimal(str(price))
            except InvalidOperation:
                raise ValueError(f"Invalid wholesale price for {self.code}: {self.wholesale_price!r}")
        if not price.is_finite():
            raise ValueError(f"Invalid wholesale price for {self.code}: {self.wholesale_price!r}")
        if price < 0:
            raise ValueError(f"Wholesale price must be non-negative for {self.code} (got {price})")
        object.__setattr__(self, "wholesale_price", price)

        if not isinstance(self.images, tuple):
            object.__setattr__(self, "images", tuple(self.images))

    @property
    def category_key(self) -> str:
        """Category used for grouping."""
        return self.category or DEFAULT_CATEGORY

    @property
    def material_key(self) -> str:
        """Material used for sub-grouping."""
        return self.material or DEFAULT_MATERIAL

    @property
    def primary_image(self) -> Optional[ProductImage]:
        return self.images[0] if self.images else None
