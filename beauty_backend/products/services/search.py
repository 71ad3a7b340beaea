# products/services/search.py

"""
======================================================
PATH: products/services/search.py
======================================================
PRODUCT SEARCH

Behaviour:
- Queries shorter than 3 characters return no results.
- Matching is a case-insensitive PREFIX match:
    1. products whose name starts with the query (by name)
    2. products whose description starts with the query
       and also contains it
- Results are merged in that order and de-duplicated by id.
"""

from __future__ import annotations

from django.db.models import Q

from products.models import Product

MIN_QUERY_LENGTH = 3
MAX_RESULTS = 50


def normalise_query(raw: str) -> str:
    return (raw or "").strip().lower()


def search_products(raw_query: str, *, limit: int = MAX_RESULTS) -> list[Product]:
    query = normalise_query(raw_query)
    if len(query) < MIN_QUERY_LENGTH:
        return []

    by_name = Product.objects.filter(name__istartswith=query).order_by("name")
    by_description = (
        Product.objects.filter(Q(description__istartswith=query) & Q(description__icontains=query))
        .exclude(name__istartswith=query)
        .order_by("name")
    )

    results: list[Product] = []
    seen = set()
    for product in list(by_name[:limit]) + list(by_description[:limit]):
        if product.pk in seen:
            continue
        seen.add(product.pk)
        results.append(product)

    return results[:limit]
