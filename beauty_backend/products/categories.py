# products/categories.py

"""
PRODUCT CATEGORIES

The storefront sells a fixed set of categories. The admin form offers
exactly these names and the public navigation links to their slugs:

    Skincare     -> /categories/skincare
    Bath & Body  -> /categories/bath-body

A slug maps back to a name by splitting on "-", capitalising each word and
joining the words with " & ".
"""

from __future__ import annotations

SKINCARE = "Skincare"
LIPS = "Lips"
FACE = "Face"
EYES = "Eyes"
NAILS = "Nails"
BATH_BODY = "Bath & Body"
FRAGRANCES = "Fragrances"

CATEGORIES = [SKINCARE, LIPS, FACE, EYES, NAILS, BATH_BODY, FRAGRANCES]

CATEGORY_CHOICES = [(name, name) for name in CATEGORIES]


def slug_to_category_name(slug: str) -> str:
    words = [w for w in (slug or "").strip().lower().split("-") if w]
    return " & ".join(w[:1].upper() + w[1:] for w in words)


def category_slug(name: str) -> str:
    words = (name or "").replace("&", " ").split()
    return "-".join(w.lower() for w in words)


def resolve_category(slug: str) -> str | None:
    """Return the known category for a slug, or None."""
    name = slug_to_category_name(slug)
    return name if name in CATEGORIES else None
