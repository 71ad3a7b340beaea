# products/services/catalog.py

"""
======================================================
PATH: products/services/catalog.py
======================================================
CATALOG QUERIES (READ-ONLY)

Ordering rules used across the storefront and admin inventory:
- "all products": in-stock first, then most recently modified first
- best sellers: is_best_seller=True, capped (home page shows 4)
- new arrivals: most recently modified first, capped (10)
- category pages: one category, most recently modified first
"""

from __future__ import annotations

from django.db.models import BooleanField, Case, F, QuerySet, Value, When

from products.categories import resolve_category
from products.models import Product

BEST_SELLERS_LIMIT = 4
NEW_ARRIVALS_LIMIT = 10


def _recent_first():
    return F("modified_at").desc(nulls_last=True)


def all_products() -> QuerySet:
    return Product.objects.annotate(
        _out_of_stock=Case(
            When(quantity=0, then=Value(True)),
            default=Value(False),
            output_field=BooleanField(),
        )
    ).order_by("_out_of_stock", _recent_first(), "-created_at")


def best_sellers(limit: int | None = BEST_SELLERS_LIMIT) -> QuerySet:
    qs = Product.objects.filter(is_best_seller=True).order_by(_recent_first(), "-created_at")
    return qs[:limit] if limit else qs


def new_arrivals(limit: int | None = NEW_ARRIVALS_LIMIT) -> QuerySet:
    qs = Product.objects.order_by(_recent_first(), "-created_at")
    return qs[:limit] if limit else qs


def products_in_category(slug: str) -> tuple[str | None, QuerySet]:
    """
    Resolve a category slug and return (category_name, products).
    Unknown slugs return (None, empty queryset).
    """
    name = resolve_category(slug)
    if name is None:
        return None, Product.objects.none()
    return name, Product.objects.filter(category=name).order_by(_recent_first(), "-created_at")


def get_product(product_id) -> Product | None:
    try:
        return Product.objects.get(pk=product_id)
    except (Product.DoesNotExist, ValueError, TypeError):
        return None
