# store/models/profile.py

"""
STORE PROFILE (SINGLETON)

One row (pk=1) holding the storefront identity shown in the header,
footer and contact page, and the WhatsApp number used at checkout.

The row is created lazily from settings on first read.
"""

from django.conf import settings
from django.db import models

SINGLETON_PK = 1


class StoreProfile(models.Model):
    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_PK, editable=False)

    name = models.CharField(max_length=120)
    tagline = models.CharField(max_length=255, blank=True, default="")
    whatsapp_number = models.CharField(
        max_length=32,
        blank=True,
        default="",
        help_text="Number that receives checkout hand-off messages, e.g. +91 7019449136.",
    )
    contact_email = models.EmailField(blank=True, default="")
    phone = models.CharField(max_length=32, blank=True, default="")
    address = models.TextField(blank=True, default="")
    currency = models.CharField(max_length=8, default="INR")

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "store profile"
        verbose_name_plural = "store profile"

    def save(self, *args, **kwargs):
        self.pk = SINGLETON_PK
        self.currency = (self.currency or "INR").strip().upper()
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        # The profile is never removed; reset it through the admin instead.
        return (0, {})

    @classmethod
    def get_solo(cls) -> "StoreProfile":
        obj, _ = cls.objects.get_or_create(
            pk=SINGLETON_PK,
            defaults={
                "name": getattr(settings, "STORE_NAME", "AYN Beauty"),
                "whatsapp_number": getattr(settings, "STORE_WHATSAPP_NUMBER", ""),
                "contact_email": getattr(settings, "STORE_CONTACT_EMAIL", ""),
                "phone": getattr(settings, "STORE_WHATSAPP_NUMBER", ""),
                "currency": getattr(settings, "STORE_CURRENCY", "INR"),
            },
        )
        return obj

    def __str__(self):
        return self.name
