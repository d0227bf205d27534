"""
Line Sheet Pipeline

Runs filter -> organize -> plan -> assemble over one product list.
Each call works only on its arguments, so repeated or concurrent calls
are independent.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Tuple

from ..common.config_loader import load_category_display_names, load_layout_settings
from ..common.constants import DEFAULT_PRODUCTS_PER_PAGE, DEFAULT_TOC_ITEMS_PER_PAGE
from ..models import PageDescriptor, Product
from .assembler import assemble
from .filters import filter_active
from .organizer import OrganizedCatalog, organize
from .planner import PageMap, plan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineSheetSettings:
    """Options for one line sheet build."""
    products_per_page: int = DEFAULT_PRODUCTS_PER_PAGE
    toc_items_per_page: int = DEFAULT_TOC_ITEMS_PER_PAGE
    include_inactive: bool = False
    category_display_names: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: Dict[str, Any], include_inactive: bool = False) -> "LineSheetSettings":
        """Build settings from a loaded linesheet.yaml dictionary."""
        layout = load_layout_settings(config)
        return cls(
            products_per_page=layout['products_per_page'],
            toc_items_per_page=layout['toc_items_per_page'],
            include_inactive=include_inactive,
            category_display_names=load_category_display_names(config),
        )


@dataclass(frozen=True)
class LineSheetDocument:
    """Everything a renderer needs for one line sheet."""
    organized: OrganizedCatalog
    page_map: PageMap
    pages: Tuple[PageDescriptor, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)


def build_document(products: Sequence[Product], settings: LineSheetSettings = None) -> LineSheetDocument:
    """
    Build a complete line sheet document from products.

    Args:
        products: Products from the upstream source
        settings: Build options (defaults: active only, 4 per page, 25 TOC items)

    Returns:
        LineSheetDocument with organized data, page map and page descriptors
    """
    if settings is None:
        settings = LineSheetSettings()

    selected = products if settings.include_inactive else filter_active(products)
    organized = organize(selected, display_names=settings.category_display_names)
    page_map = plan(
        organized.categories,
        products_per_page=settings.products_per_page,
        toc_items_per_page=settings.toc_items_per_page,
    )
    pages = assemble(organized.categories, page_map)

    logger.info(
        "Line sheet: %d product(s), %d categories, %d page(s)",
        organized.summary.total_products, organized.summary.total_categories, len(pages),
    )
    return LineSheetDocument(organized=organized, page_map=page_map, pages=pages)
