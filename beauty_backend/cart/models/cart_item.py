# cart/models/cart_item.py

"""
CART ITEM MODEL

Purpose:
- Snapshot of a product at the time it was put in the cart
  (name, price, images, category, hint) plus the chosen quantity.
- stock holds the product's stock level at the last write; quantity
  changes refresh it from the live product when that still exists.

Rules:
- One line per product per cart (DB constraint).
- Quantity must be > 0.
- Deleting a product keeps the snapshot (product becomes NULL).
"""

import uuid

from django.core.exceptions import ValidationError
from django.db import models

from products.models import Product
from .cart import Cart


class CartItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    cart = models.ForeignKey(
        Cart,
        on_delete=models.CASCADE,
        related_name="items",
    )

    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="cart_items",
    )

    name = models.CharField(max_length=255)
    price = models.PositiveIntegerField(help_text="Snapshot price in minor units.")
    images = models.JSONField(default=list, blank=True)
    category = models.CharField(max_length=64, blank=True)
    hint = models.CharField(max_length=255, blank=True)

    quantity = models.PositiveIntegerField(help_text="Must be greater than zero")
    stock = models.PositiveIntegerField(default=0, help_text="Product stock at last write.")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["cart", "product"],
                name="unique_product_per_guest_cart",
            )
        ]

    def clean(self):
        if self.quantity is None or int(self.quantity) <= 0:
            raise ValidationError({"quantity": "Quantity must be greater than zero"})

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)

    @property
    def line_total(self) -> int:
        return int(self.price or 0) * int(self.quantity or 0)

    @property
    def cover_image(self) -> str:
        return self.images[0] if self.images else ""

    def __str__(self):
        return f"{self.name} x {self.quantity}"
