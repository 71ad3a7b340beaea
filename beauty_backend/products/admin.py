# products/admin.py
"""
=====================================================
PATH: products/admin.py
=====================================================

Django admin for products (back-office fallback).

- Edits made here bypass image reconciliation; the console API is the
  normal path. hint and modified_at are still kept in step on save.
"""

from __future__ import annotations

from django.contrib import admin
from django.utils import timezone

from products.models import Product
from products.pricing import format_money


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "price_display", "quantity", "is_best_seller", "modified_at")
    list_filter = ("category", "is_best_seller")
    search_fields = ("name", "description")
    readonly_fields = ("id", "hint", "created_at", "modified_at")
    ordering = ("-modified_at",)

    @admin.display(description="Price", ordering="price")
    def price_display(self, obj):
        return format_money(obj.price)

    def save_model(self, request, obj, form, change):
        obj.hint = f"{obj.name.strip().lower()} product"
        obj.modified_at = timezone.now()
        super().save_model(request, obj, form, change)
