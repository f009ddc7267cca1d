"""Plain-text rendering of query results for the console report."""

from decimal import Decimal

from src.catalog.entities.product import Product


def format_price(price: Decimal) -> str:
    """Two fixed decimals with a thousands separator, e.g. ``$1,299.99``."""
    return f"${price:,.2f}"


def render_product_list(products: list[Product]) -> list[str]:
    lines = [f"Found {len(products)} products:"]
    for product in products:
        lines.append(f"  [{product.id}] {product.name} - {format_price(product.price)}")
        if product.description:
            lines.append(f"      Description: {product.description}")
    return lines


def render_product_detail(product: Product | None) -> list[str]:
    if product is None:
        return ["Product not found."]
    return [
        f"Product: {product.name}",
        f"  Price: {format_price(product.price)}",
        f"  Description: {product.description if product.description is not None else 'N/A'}",
        f"  Created: {product.created_at:%Y-%m-%d %H:%M:%S} UTC",
    ]
