"""
Wholesale Line Sheet Builder

Modules:
    models     - Data models (Product, CategoryGroup, page descriptors)
    common     - Shared utilities (config loader, logging, formatting)
    layout     - Catalog organization, pagination and document assembly
    airtable   - Airtable API client and record mapping
    rendering  - HTML rendering of assembled line sheet pages
"""
