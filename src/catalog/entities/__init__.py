"""Entities organized by business concept.

Each entity has its own package containing:
- entity.py: Domain model returned to callers
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .product import Product, ProductRepository, ProductTable

__all__ = [
    "Product",
    "ProductTable",
    "ProductRepository",
]
