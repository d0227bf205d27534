"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

# Grouping defaults for products missing a category or material
DEFAULT_CATEGORY = "Uncategorized"
DEFAULT_MATERIAL = "Other"

# Page densities sized for US Letter (8.5 x 11 in) pages
DEFAULT_PRODUCTS_PER_PAGE = 4
DEFAULT_TOC_ITEMS_PER_PAGE = 25

# Cover page is always the first page of the document
COVER_PAGE_NUMBER = 1
