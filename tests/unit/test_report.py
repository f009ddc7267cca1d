"""Unit tests for console report rendering."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from src.catalog.entities.product import Product
from src.catalog.report import format_price, render_product_detail, render_product_list


@pytest.fixture
def laptop() -> Product:
    return Product(
        id=1,
        name="Laptop",
        description="High-performance laptop with 16GB RAM",
        price=Decimal("1299.99"),
        created_at=datetime(2024, 3, 9, 14, 5, 7, tzinfo=UTC),
    )


@pytest.mark.parametrize(
    ("price", "expected"),
    [
        (Decimal("1299.99"), "$1,299.99"),
        (Decimal("29.99"), "$29.99"),
        (Decimal("15.9"), "$15.90"),
        (Decimal("0"), "$0.00"),
    ],
)
def test_format_price(price: Decimal, expected: str):
    assert format_price(price) == expected


def test_render_product_list(laptop: Product):
    mouse = Product(id=2, name="Wireless Mouse", price=Decimal("29.99"))

    assert render_product_list([laptop, mouse]) == [
        "Found 2 products:",
        "  [1] Laptop - $1,299.99",
        "      Description: High-performance laptop with 16GB RAM",
        "  [2] Wireless Mouse - $29.99",
    ]


def test_render_product_list_skips_empty_description():
    cable = Product(id=3, name="USB-C Cable", description="", price=Decimal("15.99"))

    assert render_product_list([cable]) == ["Found 1 products:", "  [3] USB-C Cable - $15.99"]


def test_render_empty_list():
    assert render_product_list([]) == ["Found 0 products:"]


def test_render_product_detail(laptop: Product):
    assert render_product_detail(laptop) == [
        "Product: Laptop",
        "  Price: $1,299.99",
        "  Description: High-performance laptop with 16GB RAM",
        "  Created: 2024-03-09 14:05:07 UTC",
    ]


def test_render_product_detail_without_description(laptop: Product):
    mouse = laptop.model_copy(update={"name": "Wireless Mouse", "description": None})

    assert render_product_detail(mouse)[2] == "  Description: N/A"


def test_render_missing_product():
    assert render_product_detail(None) == ["Product not found."]
