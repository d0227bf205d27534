"""Shared test fixtures."""

from decimal import Decimal

import pytest

from linesheet.models import Product, ProductImage


def make_product(code, category="Rings", material="Silver", price="25", name=None, active=True, images=()):
    """Build a Product with sensible defaults for layout tests."""
    return Product(
        code=code,
        name=name or f"Product {code}",
        material=material,
        category=category,
        wholesale_price=Decimal(price),
        active=active,
        images=images,
    )


@pytest.fixture
def product_factory():
    """Return the make_product helper."""
    return make_product


@pytest.fixture
def minimal_product():
    """Create a minimal product with only the required code."""
    return Product(code="GB-001")


@pytest.fixture
def full_product():
    """Create a fully populated product."""
    return Product(
        code="GB-R-014",
        name="Signet Ring",
        material="Sterling Silver",
        category="Rings",
        wholesale_price=Decimal("85.50"),
        active=True,
        images=(
            ProductImage(url="https://cdn.example.com/signet-front.jpg", width=800, height=1000,
                         alt_text="signet-front.jpg"),
            ProductImage(url="https://cdn.example.com/signet-side.jpg"),
        ),
        record_id="recSignet014",
    )


@pytest.fixture
def five_rings():
    """Five silver rings, deliberately out of code order."""
    return [make_product(code) for code in ["R-05", "R-02", "R-04", "R-01", "R-03"]]


@pytest.fixture
def mixed_catalog():
    """Products across three categories and several materials."""
    return [
        make_product("N-02", category="Necklaces", material="Gold", price="120"),
        make_product("R-01", category="Rings", material="Silver", price="40"),
        make_product("E-01", category="Earrings", material="Silver", price="30.50"),
        make_product("N-01", category="Necklaces", material="Silver", price="95"),
        make_product("R-02", category="Rings", material="Gold", price="150"),
        make_product("R-03", category="Rings", material="Silver", price="0"),
        make_product("E-02", category="Earrings", material="", price="22"),
    ]


@pytest.fixture
def airtable_record():
    """A raw Airtable record as returned by the list endpoint."""
    return {
        'id': 'recTest123',
        'createdTime': '2025-01-01T00:00:00.000Z',
        'fields': {
            'Product Code': 'A001',
            'Product Name': 'Silver Ring',
            'Material': 'Sterling Silver',
            'Wholesale Price': 25.00,
            'Retail Price': 50.00,
            'Category': 'Rings',
            'Active': True,
            'Images': [
                {
                    'id': 'attImg123',
                    'url': 'https://example.com/image.jpg',
                    'filename': 'ring.jpg',
                    'size': 12345,
                    'type': 'image/jpeg',
                    'thumbnails': {
                        'small': {'url': 'https://example.com/s.jpg', 'width': 36, 'height': 48},
                        'large': {'url': 'https://example.com/l.jpg', 'width': 512, 'height': 683},
                    },
                },
            ],
        },
    }
