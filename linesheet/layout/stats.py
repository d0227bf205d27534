"""
Line Sheet Statistics

Reporting figures over an organized catalog: price ranges, a
per-category breakdown and simple catalog recommendations.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from ..models import CategoryGroup
from .organizer import OrganizedCatalog

MIN_RECOMMENDED_PRODUCTS = 10


def price_ranges(categories: Sequence[CategoryGroup]) -> Dict[str, Dict[str, Decimal]]:
    """
    Min, max and average wholesale price per category.

    Products priced at zero are ignored; categories with no priced
    products are left out.
    """
    ranges = {}
    for group in categories:
        prices = [p.wholesale_price for p in group.products if p.wholesale_price > 0]
        if prices:
            ranges[group.name] = {
                'min': min(prices),
                'max': max(prices),
                'average': sum(prices, Decimal("0")) / len(prices),
            }
    return ranges


def _recommendations(organized: OrganizedCatalog) -> List[str]:
    recommendations = []
    if organized.summary.total_products < MIN_RECOMMENDED_PRODUCTS:
        recommendations.append('Consider adding more products to create a fuller catalog')
    if organized.summary.total_categories == 1:
        recommendations.append('Consider expanding into additional product categories')
    return recommendations


def line_sheet_stats(organized: OrganizedCatalog, now: Optional[datetime] = None) -> dict:
    """
    Build the statistics report for an organized catalog.

    Args:
        organized: Result of organize()
        now: Report timestamp (defaults to the current UTC time)

    Returns:
        Dictionary with timestamp, summary, price_ranges,
        category_breakdown and recommendations
    """
    if now is None:
        now = datetime.now(timezone.utc)

    ranges = price_ranges(organized.categories)
    breakdown = []
    for group in organized.categories:
        breakdown.append({
            'category': group.name,
            'product_count': group.total_count,
            'material_count': len(group.materials),
            'average_price': (
                group.total_wholesale_value / group.total_count if group.total_count else Decimal("0")
            ),
            'price_range': ranges.get(group.name),
        })

    return {
        'timestamp': now.isoformat(),
        'summary': organized.summary.as_dict(),
        'price_ranges': ranges,
        'category_breakdown': breakdown,
        'recommendations': _recommendations(organized),
    }
