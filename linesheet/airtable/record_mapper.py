"""
Airtable Record Mapper

Converts raw Airtable records into Product models using a fixed list of
accepted column names per attribute.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..models import Product, ProductImage

logger = logging.getLogger(__name__)

# Product attribute -> Airtable column names, first present wins
FIELD_CANDIDATES = {
    'code': ['SKU', 'Product Code'],
    'name': ['Name', 'Product Name'],
    'material': ['Material'],
    'category': ['Category'],
    'wholesale_price': ['Wholesale_Price', 'Wholesale Price'],
    'images': ['Photos', 'Images'],
}

# Checkbox columns that exclude a product when explicitly unchecked
ACTIVE_FIELDS = ['Line_Sheet', 'Active']

# Thumbnail sizes checked for image dimensions, largest first
THUMBNAIL_SIZES = ['large', 'full', 'small']


def _first_field(fields: Dict[str, Any], attribute: str, default: Any = None) -> Any:
    for column in FIELD_CANDIDATES[attribute]:
        value = fields.get(column)
        if value not in (None, ''):
            return value
    return default


def parse_price(value: Any) -> Decimal:
    """
    Parse a currency cell into a Decimal.

    Example:
        >>> parse_price("$1,250.00")
        Decimal('1250.00')
        >>> parse_price(None)
        Decimal('0')
    """
    if value in (None, ''):
        return Decimal("0")
    if isinstance(value, bool):
        raise ValueError(f"Not a valid price: {value!r}")
    cleaned = str(value).replace('$', '').replace(',', '').strip()
    try:
        price = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Not a valid price: {value!r}")
    if not price.is_finite():
        raise ValueError(f"Not a valid price: {value!r}")
    return price


def _text(value: Any) -> str:
    if isinstance(value, list):
        # Multiple select / lookup columns come back as lists
        value = value[0] if value else ''
    return str(value).strip() if value is not None else ''


def map_images(attachments: Any) -> Tuple[ProductImage, ...]:
    """Convert an attachment cell into ProductImage objects."""
    if not isinstance(attachments, list):
        return ()

    images = []
    for attachment in attachments:
        if not isinstance(attachment, dict) or not attachment.get('url'):
            continue
        thumbnails = attachment.get('thumbnails') or {}
        width = height = None
        for size in THUMBNAIL_SIZES:
            thumb = thumbnails.get(size)
            if thumb and thumb.get('width') and thumb.get('height'):
                width, height = thumb['width'], thumb['height']
                break
        images.append(ProductImage(
            url=attachment['url'],
            width=width,
            height=height,
            alt_text=attachment.get('filename', ''),
        ))
    return tuple(images)


def is_active(fields: Dict[str, Any]) -> bool:
    """A record is active unless a line sheet checkbox is explicitly false."""
    return all(fields.get(column) is not False for column in ACTIVE_FIELDS)


def record_to_product(record: Dict[str, Any]) -> Optional[Product]:
    """
    Convert one Airtable record into a Product.

    Args:
        record: Raw record ({id, createdTime, fields})

    Returns:
        Product, or None when the record has no SKU or an unusable price
    """
    fields = record.get('fields') or {}
    record_id = record.get('id', '')

    code = _text(_first_field(fields, 'code', ''))
    if not code:
        logger.warning("Skipping record %s: no SKU", record_id or '(unknown)')
        return None

    try:
        return Product(
            code=code,
            name=_text(_first_field(fields, 'name', '')) or 'Unnamed Product',
            material=_text(_first_field(fields, 'material', '')),
            category=_text(_first_field(fields, 'category', '')),
            wholesale_price=parse_price(_first_field(fields, 'wholesale_price')),
            active=is_active(fields),
            images=map_images(_first_field(fields, 'images', [])),
            record_id=record_id,
        )
    except ValueError as e:
        logger.warning("Skipping record %s (%s): %s", record_id or '(unknown)', code, e)
        return None


def records_to_products(records: Iterable[Dict[str, Any]]) -> List[Product]:
    """Convert records in order, dropping the ones that cannot be mapped."""
    products = []
    for record in records:
        product = record_to_product(record)
        if product is not None:
            products.append(product)
    return products
