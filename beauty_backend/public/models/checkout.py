# public/models/checkout.py

"""
PATH: public/models/checkout.py

CHECKOUT HAND-OFF RECORD

Why this model exists:
- Checkout does not take payment; the shopper is sent to WhatsApp with a
  pre-filled order message and the shop confirms the order in chat.
- This row is the server-side trace of that hand-off: what was in the
  cart, at which prices, and the exact link the shopper was given.

Design principles:
- Append-only (no status lifecycle here; the conversation happens off-site).
- Line snapshot is stored as JSON so later product edits do not rewrite it.
"""

from __future__ import annotations

import uuid

from django.db import models
from django.utils import timezone


class CheckoutHandoff(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    reference = models.CharField(
        max_length=64,
        unique=True,
        blank=True,
        help_text="System-generated order reference quoted in the message",
    )

    cart = models.ForeignKey(
        "cart.Cart",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="handoffs",
    )

    currency = models.CharField(max_length=8, default="INR")

    # [{"product_id": "...", "name": "...", "quantity": 2, "price": 59900, "line_total": 119800}]
    items = models.JSONField(default=list, blank=True)

    subtotal = models.PositiveBigIntegerField(default=0, help_text="Minor units.")
    total = models.PositiveBigIntegerField(default=0, help_text="Minor units (shipping is free).")

    customer_name = models.CharField(max_length=255, blank=True, default="")
    customer_phone = models.CharField(max_length=64, blank=True, default="")
    note = models.TextField(blank=True, default="")

    message = models.TextField(blank=True, default="")
    whatsapp_url = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-created_at"]

    def save(self, *args, **kwargs):
        if not self.reference:
            self.reference = self.new_reference()
        super().save(*args, **kwargs)

    @staticmethod
    def new_reference() -> str:
        prefix = timezone.now().strftime("AYN%Y%m%d")
        return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"

    @property
    def item_count(self) -> int:
        return sum(int(line.get("quantity", 0) or 0) for line in self.items or [])

    def __str__(self):
        return self.reference
