"""
PATH: cart/models/cart.py

GUEST CART MODEL

Purpose:
- Anonymous shopping cart; the client keeps only the cart id.
- Lines are denormalized product snapshots (see CartItem).
- Derive subtotal + item count from the lines.

Rules:
- Checkout deactivates the cart.
- Cart is read-only after deactivation.
"""

import uuid

from django.db import models
from django.db.models import F, Sum


class Cart(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    @property
    def item_count(self) -> int:
        total = self.items.aggregate(total=Sum("quantity")).get("total")
        return int(total or 0)

    @property
    def subtotal(self) -> int:
        """Sum of price * quantity across lines, minor units."""
        total = self.items.aggregate(total=Sum(F("price") * F("quantity"))).get("total")
        return int(total or 0)

    def __str__(self):
        status = "ACTIVE" if self.is_active else "CLOSED"
        return f"Cart {self.id} | {status}"
