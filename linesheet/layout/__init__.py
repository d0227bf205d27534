"""
Line sheet layout: organize products, plan pages, assemble descriptors.

Modules:
    filters   - Active-product selection and display sorting
    organizer - Category / material grouping and summary
    planner   - Page number assignment for cover, TOC and categories
    assembler - Ordered page descriptors for rendering
    pipeline  - filter -> organize -> plan -> assemble in one call
    stats     - Price ranges and catalog statistics
"""

from .assembler import assemble
from .errors import ConsistencyError, InvalidInputError, LineSheetError
from .filters import filter_active, sort_products
from .organizer import OrganizedCatalog, organize
from .pipeline import LineSheetDocument, LineSheetSettings, build_document
from .planner import CategoryPlacement, PageCounter, PageMap, plan
from .stats import line_sheet_stats, price_ranges

__all__ = [
    # Errors
    'LineSheetError',
    'InvalidInputError',
    'ConsistencyError',
    # Pipeline stages
    'filter_active',
    'sort_products',
    'organize',
    'OrganizedCatalog',
    'plan',
    'PageMap',
    'PageCounter',
    'CategoryPlacement',
    'assemble',
    'build_document',
    'LineSheetSettings',
    'LineSheetDocument',
    # Reporting
    'line_sheet_stats',
    'price_ranges',
]
