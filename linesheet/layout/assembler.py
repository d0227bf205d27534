"""
Document Assembler

Combines organized categories with a page map into the ordered page
descriptors a renderer consumes: cover, TOC pages, then category pages.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from ..models import CategoryGroup, CategoryPage, CoverPage, PageDescriptor, TOCHeading, TOCPage
from .errors import ConsistencyError
from .planner import PageMap, pages_needed

logger = logging.getLogger(__name__)


def _check_consistency(categories: Sequence[CategoryGroup], page_map: PageMap) -> None:
    """Raise ConsistencyError unless the page map covers exactly these categories."""
    names = [group.name for group in categories if group.total_count]
    planned = page_map.category_names()

    if len(set(names)) != len(names):
        raise ConsistencyError(f"Duplicate category names in input: {names}")

    missing = [name for name in names if name not in planned]
    extra = [name for name in planned if name not in names]
    if missing or extra:
        raise ConsistencyError(
            f"Page map does not match categories (missing: {missing}, unexpected: {extra})"
        )
    if names != planned:
        raise ConsistencyError(f"Page map order {planned} differs from category order {names}")

    planned_rows: Dict[str, List[str]] = {}
    heading_counts: Dict[str, int] = {}
    for item in page_map.toc_items:
        if isinstance(item, TOCHeading):
            heading_counts[item.category] = item.product_count
        else:
            planned_rows.setdefault(item.category, []).append(item.sku)

    for group in categories:
        if not group.total_count:
            continue
        placement = page_map.placement_for(group.name)
        expected = pages_needed(group.total_count, page_map.products_per_page)
        if placement.page_count != expected:
            raise ConsistencyError(
                f"Category {group.name!r} has {group.total_count} products needing "
                f"{expected} page(s), but the page map reserves {placement.page_count}"
            )
        if heading_counts.get(group.name) != group.total_count:
            raise ConsistencyError(
                f"Table of contents heading for {group.name!r} counts "
                f"{heading_counts.get(group.name)} products, category has {group.total_count}"
            )
        if planned_rows.get(group.name, []) != [product.code for product in group.products]:
            raise ConsistencyError(
                f"Table of contents rows for {group.name!r} do not match its products "
                f"(planned {len(planned_rows.get(group.name, []))}, found {group.total_count})"
            )


def _category_pages(group: CategoryGroup, start_page: int, per_page: int) -> List[CategoryPage]:
    products = group.products
    pages = []
    for section_index, offset in enumerate(range(0, len(products), per_page), 1):
        pages.append(CategoryPage(
            category=group.name,
            display_name=group.display_name,
            section_index=section_index,
            page_number=start_page + section_index - 1,
            products=products[offset:offset + per_page],
        ))
    return pages


def assemble(categories: Sequence[CategoryGroup], page_map: PageMap) -> Tuple[PageDescriptor, ...]:
    """
    Build the page descriptors for a line sheet.

    Args:
        categories: The same category groups the page map was planned from
        page_map: Result of plan() for these categories

    Returns:
        Tuple of descriptors numbered 1..N without gaps

    Raises:
        ConsistencyError: If the page map and categories disagree
    """
    _check_consistency(categories, page_map)

    pages: List[PageDescriptor] = [CoverPage(page_number=page_map.cover_page)]

    for index, items in enumerate(page_map.toc_pages, 1):
        pages.append(TOCPage(
            index=index,
            page_number=page_map.first_toc_page + index - 1,
            items=items,
        ))

    for group in categories:
        if not group.total_count:
            continue
        placement = page_map.placement_for(group.name)
        if placement.start_page != len(pages) + 1:
            raise ConsistencyError(
                f"Category {group.name!r} planned to start on page {placement.start_page}, "
                f"but the document is at page {len(pages) + 1}"
            )
        pages.extend(_category_pages(group, placement.start_page, page_map.products_per_page))

    if len(pages) != page_map.total_pages:
        raise ConsistencyError(
            f"Assembled {len(pages)} page(s), page map expects {page_map.total_pages}"
        )

    logger.debug("Assembled %d page(s)", len(pages))
    return tuple(pages)
