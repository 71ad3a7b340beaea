# products/services/inventory.py

"""
======================================================
PATH: products/services/inventory.py
======================================================
INVENTORY SERVICES (ADMIN CONSOLE)

Purpose:
- Create / edit / delete products.
- Best-seller toggle used by the inventory table.
- Image reconciliation on edit:
    1. URLs dropped from keep_images are removed (managed objects deleted)
    2. new files are uploaded in order
    3. final list = kept URLs (existing order) + new URLs
    4. an empty list gets a placeholder image

Rules:
- price is in minor units here; serializers convert from major units.
- hint is always derived from the name ("<name> product").
- modified_at is stamped on every write (drives "new arrivals").
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from products.categories import CATEGORIES
from products.models import Product
from products.models.product import MAX_STOCK_QUANTITY
from products.pricing import MAX_PRICE_MINOR
from products.services.images import (
    delete_image,
    delete_images_on_commit,
    placeholder_image_url,
    upload_images,
)

logger = logging.getLogger(__name__)

MIN_DESCRIPTION_LENGTH = 10

EDITABLE_FIELDS = ("name", "description", "category", "is_best_seller", "price", "quantity")


def _hint_for(name: str) -> str:
    return f"{(name or '').strip().lower()} product"


def _to_int(value, *, field_name: str) -> int:
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError({field_name: f"{field_name} must be an integer"})
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError({field_name: f"{field_name} must be an integer"})


def _validate_fields(data: dict) -> dict:
    """
    Validate + normalise the editable fields present in `data`.
    Collects all field errors before raising.
    """
    errors = {}
    cleaned = {}

    if "name" in data:
        name = (data.get("name") or "").strip()
        if not name:
            errors["name"] = "Product name is required"
        cleaned["name"] = name

    if "description" in data:
        description = (data.get("description") or "").strip()
        if len(description) < MIN_DESCRIPTION_LENGTH:
            errors["description"] = "Description must be at least 10 characters long."
        cleaned["description"] = description

    if "category" in data:
        category = (data.get("category") or "").strip()
        if category not in CATEGORIES:
            errors["category"] = "Category is required"
        cleaned["category"] = category

    if "is_best_seller" in data:
        cleaned["is_best_seller"] = bool(data.get("is_best_seller"))

    if "price" in data:
        try:
            price = _to_int(data.get("price"), field_name="price")
        except ValidationError:
            price = 0
        if price <= 0:
            errors["price"] = "Price must be a positive number"
        elif price > MAX_PRICE_MINOR:
            errors["price"] = "Price is above the allowed maximum"
        cleaned["price"] = price

    if "quantity" in data:
        try:
            quantity = _to_int(data.get("quantity"), field_name="quantity")
        except ValidationError:
            quantity = -1
        if quantity < 0:
            errors["quantity"] = "Quantity must be a non-negative integer"
        elif quantity > MAX_STOCK_QUANTITY:
            errors["quantity"] = "Quantity is above the allowed maximum"
        cleaned["quantity"] = quantity

    if errors:
        raise ValidationError(errors)

    return cleaned


# =====================================================
# CREATE
# =====================================================

@transaction.atomic
def create_product(
    *,
    name: str,
    description: str,
    category: str,
    price: int,
    quantity: int,
    is_best_seller: bool = False,
    image_files=None,
    image_url: str | None = None,
) -> Product:
    cleaned = _validate_fields(
        {
            "name": name,
            "description": description,
            "category": category,
            "price": price,
            "quantity": quantity,
            "is_best_seller": is_best_seller,
        }
    )

    images: list[str] = []
    if image_url:
        images.append(image_url.strip())

    uploaded = upload_images(image_files or [])
    images.extend(uploaded)

    if not images:
        images = [placeholder_image_url(cleaned["name"])]

    now = timezone.now()
    try:
        product = Product.objects.create(
            **cleaned,
            images=images,
            hint=_hint_for(cleaned["name"]),
            created_at=now,
            modified_at=now,
        )
    except Exception:
        for url in uploaded:
            delete_image(url)
        raise

    logger.info(
        "Product created",
        extra={"product_id": str(product.id), "images": len(images)},
    )
    return product


# =====================================================
# UPDATE
# =====================================================

@transaction.atomic
def update_product(
    product: Product,
    *,
    changes: dict | None = None,
    keep_images: list[str] | None = None,
    new_files=None,
) -> Product:
    """
    Apply field changes and (optionally) reconcile images.

    keep_images=None and no new files means "images untouched".
    keep_images=[] removes every current image.
    """
    changes = {k: v for k, v in (changes or {}).items() if k in EDITABLE_FIELDS}
    cleaned = _validate_fields(changes)

    for field, value in cleaned.items():
        setattr(product, field, value)

    product.hint = _hint_for(product.name)
    product.modified_at = timezone.now()

    new_files = list(new_files or [])
    images_changed = keep_images is not None or bool(new_files)

    removed: list[str] = []
    uploaded: list[str] = []

    if images_changed:
        current = list(product.images or [])
        keep_set = set(current if keep_images is None else keep_images)

        kept = [url for url in current if url in keep_set]
        removed = [url for url in current if url not in keep_set]

        uploaded = upload_images(new_files)

        final = kept + uploaded
        if not final:
            final = [placeholder_image_url(product.name)]
        product.images = final

    try:
        product.save()
    except Exception:
        for url in uploaded:
            delete_image(url)
        raise

    delete_images_on_commit(removed)

    logger.info(
        "Product updated",
        extra={
            "product_id": str(product.id),
            "fields": sorted(cleaned),
            "images_removed": len(removed),
            "images_added": len(uploaded),
        },
    )
    return product


def set_best_seller(product: Product, value: bool) -> Product:
    product.is_best_seller = bool(value)
    product.modified_at = timezone.now()
    product.save(update_fields=["is_best_seller", "modified_at"])

    logger.info(
        "Best seller toggled",
        extra={"product_id": str(product.id), "is_best_seller": product.is_best_seller},
    )
    return product


# =====================================================
# DELETE
# =====================================================

@transaction.atomic
def delete_product(product: Product) -> None:
    images = list(product.images or [])
    product_id = str(product.id)

    product.delete()

    scheduled = delete_images_on_commit(images)
    logger.info(
        "Product deleted",
        extra={"product_id": product_id, "images_scheduled_for_removal": scheduled},
    )
