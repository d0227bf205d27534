"""
Display Formatting

Helpers that turn catalog values into display strings.
"""

from decimal import Decimal
from typing import Mapping, Optional

# Singular and plural jewelry categories share one canonical heading
CATEGORY_DISPLAY_NAMES = {
    'Ring': 'RINGS',
    'Rings': 'RINGS',
    'Necklace': 'NECKLACES',
    'Necklaces': 'NECKLACES',
    'Earring': 'EARRINGS',
    'Earrings': 'EARRINGS',
    'Bracelet': 'BRACELETS',
    'Bracelets': 'BRACELETS',
}


def format_category_name(category: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    """
    Format a category name for display.

    Args:
        category: Raw category name (the grouping key)
        overrides: Extra display names checked before the built-in table

    Returns:
        Canonical uppercase display name

    Example:
        >>> format_category_name("Ring")
        'RINGS'
        >>> format_category_name("Anklets")
        'ANKLETS'
    """
    if overrides and category in overrides:
        return overrides[category]
    return CATEGORY_DISPLAY_NAMES.get(category, category.upper())


def format_price(price) -> str:
    """
    Format a wholesale price in dollars.

    Whole amounts drop the cents, anything else shows two decimals.

    Example:
        >>> format_price(Decimal("25"))
        '$25'
        >>> format_price(Decimal("25.5"))
        '$25.50'
    """
    amount = Decimal(str(price or 0))
    if amount == amount.to_integral_value():
        return f"${amount.quantize(Decimal('1')):,f}"
    return f"${amount.quantize(Decimal('0.01')):,f}"
