"""
Pagination Planner

Assigns absolute page numbers to the cover, the table of contents and
every category page before anything is rendered.

The table of contents lists page numbers of categories that are printed
after it, so its length has to be known first. Planning therefore runs:

1. count TOC items (one heading plus one row per product, per category)
2. derive the TOC page count from that count alone
3. lay out category pages starting right after the cover and the TOC
4. enumerate TOC items with those starting pages and slice them into pages

Categories without products are skipped: no pages, no TOC heading.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..common.constants import COVER_PAGE_NUMBER, DEFAULT_PRODUCTS_PER_PAGE, DEFAULT_TOC_ITEMS_PER_PAGE
from ..models import CategoryGroup, TOCHeading, TOCItem, TOCProductRow

logger = logging.getLogger(__name__)


class PageCounter:
    """
    Running page number accumulator.

    Usage:
        counter = PageCounter(last_used=3)
        start = counter.reserve(2)  # -> 4, counter.last_used == 5
    """

    def __init__(self, last_used: int = 0):
        self.last_used = last_used

    @property
    def next_page(self) -> int:
        return self.last_used + 1

    def reserve(self, count: int) -> int:
        """Reserve count consecutive pages and return the first one."""
        if count < 0:
            raise ValueError(f"Cannot reserve a negative page count ({count})")
        start = self.next_page
        self.last_used += count
        return start


@dataclass(frozen=True)
class CategoryPlacement:
    """Where a category's pages fall in the document."""
    name: str
    start_page: int
    page_count: int

    @property
    def end_page(self) -> int:
        return self.start_page + self.page_count - 1


@dataclass(frozen=True)
class PageMap:
    """Complete page assignment for one line sheet."""
    placements: Tuple[CategoryPlacement, ...]
    toc_pages: Tuple[Tuple[TOCItem, ...], ...]
    total_pages: int
    products_per_page: int
    toc_items_per_page: int
    cover_page: int = COVER_PAGE_NUMBER

    @property
    def toc_page_count(self) -> int:
        return len(self.toc_pages)

    @property
    def first_toc_page(self) -> int:
        return self.cover_page + 1

    @property
    def toc_items(self) -> Tuple[TOCItem, ...]:
        return tuple(item for page in self.toc_pages for item in page)

    def placement_for(self, name: str) -> CategoryPlacement:
        for placement in self.placements:
            if placement.name == name:
                return placement
        raise KeyError(name)

    def category_names(self) -> List[str]:
        return [placement.name for placement in self.placements]


def pages_needed(item_count: int, per_page: int) -> int:
    """Number of pages for item_count items at per_page items each."""
    return math.ceil(item_count / per_page)


def count_toc_items(categories: Sequence[CategoryGroup]) -> int:
    """One heading per non-empty category plus one row per product."""
    return sum(1 + group.total_count for group in categories if group.total_count)


def _check_density(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise ValueError(f"{name} must be a positive integer (got {value!r})")


def _layout_categories(
    categories: Sequence[CategoryGroup],
    counter: PageCounter,
    products_per_page: int,
) -> Tuple[CategoryPlacement, ...]:
    placements = []
    for group in categories:
        if not group.total_count:
            logger.warning("Skipping category with no products: %s", group.name)
            continue
        page_count = pages_needed(group.total_count, products_per_page)
        start = counter.reserve(page_count)
        placements.append(CategoryPlacement(group.name, start, page_count))
    return tuple(placements)


def _toc_items(
    categories: Sequence[CategoryGroup],
    placements: Dict[str, CategoryPlacement],
) -> List[TOCItem]:
    items: List[TOCItem] = []
    for group in categories:
        if not group.total_count:
            continue
        start = placements[group.name].start_page
        items.append(TOCHeading(
            category=group.name,
            display_name=group.display_name,
            page=start,
            product_count=group.total_count,
        ))
        for product in group.products:
            items.append(TOCProductRow(
                category=group.name,
                sku=product.code,
                name=product.name,
                material=product.material_key,
                price=product.wholesale_price,
                page=start,
            ))
    return items


def plan(
    categories: Sequence[CategoryGroup],
    products_per_page: int = DEFAULT_PRODUCTS_PER_PAGE,
    toc_items_per_page: int = DEFAULT_TOC_ITEMS_PER_PAGE,
) -> PageMap:
    """
    Compute the page map for a sequence of category groups.

    Args:
        categories: Organized categories, in document order
        products_per_page: Products per category page
        toc_items_per_page: TOC items (headings and rows) per TOC page

    Returns:
        PageMap with category placements and pre-sliced TOC pages

    Raises:
        ValueError: If a density is not a positive integer
    """
    _check_density("products_per_page", products_per_page)
    _check_density("toc_items_per_page", toc_items_per_page)

    toc_item_count = count_toc_items(categories)
    toc_page_count = pages_needed(toc_item_count, toc_items_per_page)

    counter = PageCounter(last_used=COVER_PAGE_NUMBER + toc_page_count)
    placements = _layout_categories(categories, counter, products_per_page)

    items = _toc_items(categories, {p.name: p for p in placements})
    toc_pages = tuple(
        tuple(items[start:start + toc_items_per_page])
        for start in range(0, len(items), toc_items_per_page)
    )

    logger.debug(
        "Planned %d page(s): %d TOC page(s) for %d item(s), %d categories",
        counter.last_used, toc_page_count, toc_item_count, len(placements),
    )
    return PageMap(
        placements=placements,
        toc_pages=toc_pages,
        total_pages=counter.last_used,
        products_per_page=products_per_page,
        toc_items_per_page=toc_items_per_page,
    )
