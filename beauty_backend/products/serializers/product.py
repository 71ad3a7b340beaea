# products/serializers/product.py

"""
PRODUCT SERIALIZERS

Read side (ProductSerializer):
- Shared by the admin inventory table and the public storefront.
- price is exposed three ways: minor units, major units, display string.

Write side (ProductWriteSerializer):
- Admin add/edit form. Accepts multipart (image files) or JSON.
- price_amount is in major units ("59.99"); converted to minor units here.
- keep_images lists the existing image URLs that should survive an edit.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from rest_framework import serializers

from products.categories import CATEGORIES, category_slug
from products.models import Product
from products.models.product import MAX_STOCK_QUANTITY
from products.pricing import MAX_PRICE, format_money, to_major_units, to_minor_units


class ProductSerializer(serializers.ModelSerializer):
    """
    Canonical read serializer.

    GUARANTEES:
    - images keeps the stored order (first one is the cover)
    - is_out_of_stock is derived from quantity
    """

    category_slug = serializers.SerializerMethodField()
    price_amount = serializers.SerializerMethodField()
    price_display = serializers.SerializerMethodField()
    is_out_of_stock = serializers.BooleanField(read_only=True)
    cover_image = serializers.CharField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "category",
            "category_slug",
            "is_best_seller",
            "price",
            "price_amount",
            "price_display",
            "quantity",
            "is_out_of_stock",
            "images",
            "cover_image",
            "hint",
            "created_at",
            "modified_at",
        ]
        read_only_fields = fields

    def get_category_slug(self, obj) -> str:
        return category_slug(obj.category)

    def get_price_amount(self, obj) -> str:
        return str(to_major_units(obj.price))

    def get_price_display(self, obj) -> str:
        return format_money(obj.price, getattr(settings, "STORE_CURRENCY", "INR"))


class ProductCardSerializer(ProductSerializer):
    """Compact shape for product grids and search suggestions."""

    class Meta(ProductSerializer.Meta):
        fields = [
            "id",
            "name",
            "category",
            "category_slug",
            "is_best_seller",
            "price",
            "price_display",
            "quantity",
            "is_out_of_stock",
            "cover_image",
            "hint",
        ]
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    """
    Admin product form.

    On create every field except images/is_best_seller is required.
    On update (partial=True) only the fields sent are validated.
    """

    name = serializers.CharField(max_length=255, trim_whitespace=True)
    description = serializers.CharField(
        min_length=10,
        trim_whitespace=True,
        error_messages={"min_length": "Description must be at least 10 characters long."},
    )
    category = serializers.ChoiceField(
        choices=CATEGORIES,
        error_messages={"invalid_choice": "Category is required"},
    )
    is_best_seller = serializers.BooleanField(required=False, default=False)
    price_amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.01"),
        max_value=MAX_PRICE,
        error_messages={
            "min_value": "Price must be a positive number",
            "max_value": f"Price cannot exceed {MAX_PRICE}",
        },
    )
    quantity = serializers.IntegerField(
        min_value=0,
        max_value=MAX_STOCK_QUANTITY,
        error_messages={
            "min_value": "Quantity must be a non-negative integer",
            "max_value": f"Quantity cannot exceed {MAX_STOCK_QUANTITY}",
        },
    )

    images = serializers.ListField(
        child=serializers.FileField(), required=False, allow_empty=True, write_only=True
    )
    keep_images = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False, allow_empty=True, write_only=True
    )
    image_url = serializers.URLField(required=False, allow_blank=True, write_only=True)

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("Product name is required")
        return v

    def to_service_kwargs(self) -> dict:
        """Field changes in the shape products.services.inventory expects."""
        data = dict(self.validated_data)
        fields = {}
        for key in ("name", "description", "category", "is_best_seller", "quantity"):
            if key in data:
                fields[key] = data[key]
        if "price_amount" in data:
            fields["price"] = to_minor_units(data["price_amount"])
        return fields


class BestSellerToggleSerializer(serializers.Serializer):
    is_best_seller = serializers.BooleanField()
