# products/views/__init__.py

"""
Products views package exports.
"""

from .category import CategoryListView, DashboardView
from .product import ProductViewSet

__all__ = [
    "CategoryListView",
    "DashboardView",
    "ProductViewSet",
]
