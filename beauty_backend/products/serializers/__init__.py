# products/serializers/__init__.py

from .category import CategoryChartEntrySerializer, CategorySerializer, DashboardSerializer
from .product import (
    BestSellerToggleSerializer,
    ProductCardSerializer,
    ProductSerializer,
    ProductWriteSerializer,
)

__all__ = [
    "BestSellerToggleSerializer",
    "CategoryChartEntrySerializer",
    "CategorySerializer",
    "DashboardSerializer",
    "ProductCardSerializer",
    "ProductSerializer",
    "ProductWriteSerializer",
]
