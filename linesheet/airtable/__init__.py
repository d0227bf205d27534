"""
Airtable integration modules.

Modules:
    api_client    - REST client with rate limiting and pagination
    record_mapper - Raw record -> Product conversion
"""

from .api_client import AirtableAPIClient
from .record_mapper import (
    FIELD_CANDIDATES,
    is_active,
    map_images,
    parse_price,
    record_to_product,
    records_to_products,
)

__all__ = [
    # API Client
    'AirtableAPIClient',
    # Record mapping
    'FIELD_CANDIDATES',
    'record_to_product',
    'records_to_products',
    'map_images',
    'parse_price',
    'is_active',
]
