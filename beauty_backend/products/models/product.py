# products/models/product.py

import uuid

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator
from django.db import models
from django.utils import timezone

from products.categories import CATEGORIES, CATEGORY_CHOICES
from products.pricing import MAX_PRICE_MINOR

MAX_STOCK_QUANTITY = 1_000_000


class Product(models.Model):
    """
    A sellable beauty product.

    PRICE MODEL (IMPORTANT):
    - price is stored in minor units (paise) as an integer
    - quantity is the units on hand; 0 means "Out of Stock"
    - images is an ordered list of public URLs (first one is the cover)
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField()
    category = models.CharField(max_length=64, choices=CATEGORY_CHOICES, db_index=True)

    is_best_seller = models.BooleanField(default=False, db_index=True)

    price = models.PositiveIntegerField(
        validators=[MaxValueValidator(MAX_PRICE_MINOR)],
        help_text="Selling price in minor units (paise).",
    )
    quantity = models.PositiveIntegerField(
        default=0,
        validators=[MaxValueValidator(MAX_STOCK_QUANTITY)],
        help_text="Units in stock.",
    )

    images = models.JSONField(default=list, blank=True)
    hint = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    modified_at = models.DateTimeField(null=True, blank=True, db_index=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["category", "-modified_at"], name="product_category_modified_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.category})"

    def clean(self):
        if not (self.name or "").strip():
            raise ValidationError({"name": "Product name is required"})

        if self.category not in CATEGORIES:
            raise ValidationError({"category": "Category is required"})

        if self.price is None or int(self.price) <= 0:
            raise ValidationError({"price": "Price must be a positive number"})

        if not isinstance(self.images, list):
            raise ValidationError({"images": "images must be a list of URLs"})

    @property
    def is_out_of_stock(self) -> bool:
        return int(self.quantity or 0) == 0

    @property
    def cover_image(self) -> str:
        return self.images[0] if self.images else ""

    @property
    def short_description(self) -> str:
        text = self.description or ""
        return f"{text[:100]}..." if len(text) > 100 else text
