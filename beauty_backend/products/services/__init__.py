# products/services/__init__.py

from .catalog import all_products, best_sellers, get_product, new_arrivals, products_in_category
from .dashboard import dashboard_summary
from .inventory import create_product, delete_product, set_best_seller, update_product
from .search import search_products

__all__ = [
    "all_products",
    "best_sellers",
    "create_product",
    "dashboard_summary",
    "delete_product",
    "get_product",
    "new_arrivals",
    "products_in_category",
    "search_products",
    "set_best_seller",
    "update_product",
]
