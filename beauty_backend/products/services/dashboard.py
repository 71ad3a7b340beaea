# products/services/dashboard.py

"""
======================================================
PATH: products/services/dashboard.py
======================================================
ADMIN DASHBOARD SUMMARY

Cards:
- total products
- out of stock (quantity == 0)
- low stock (0 < quantity <= LOW_STOCK_THRESHOLD)
- best sellers
- stock value (sum of price * quantity, minor units)

Chart:
- products per category: [{"name": <category>, "total": <count>}]
  Every category appears, zero-count ones included.
"""

from __future__ import annotations

from django.conf import settings
from django.db.models import Count, F, Sum

from products.categories import CATEGORIES
from products.models import Product
from products.pricing import format_money


def low_stock_threshold() -> int:
    return int(getattr(settings, "LOW_STOCK_THRESHOLD", 5))


def category_chart() -> list[dict]:
    counts = dict(
        Product.objects.values("category")
        .annotate(total=Count("id"))
        .values_list("category", "total")
    )
    return [{"name": name, "total": int(counts.get(name, 0))} for name in CATEGORIES]


def dashboard_summary() -> dict:
    threshold = low_stock_threshold()
    qs = Product.objects.all()

    stock_value = qs.aggregate(v=Sum(F("price") * F("quantity")))["v"] or 0
    currency = getattr(settings, "STORE_CURRENCY", "INR")

    return {
        "total_products": qs.count(),
        "out_of_stock": qs.filter(quantity=0).count(),
        "low_stock": qs.filter(quantity__gt=0, quantity__lte=threshold).count(),
        "low_stock_threshold": threshold,
        "best_sellers": qs.filter(is_best_seller=True).count(),
        "stock_value": int(stock_value),
        "stock_value_display": format_money(int(stock_value), currency),
        "chart": category_chart(),
    }
