# cart/serializers.py

"""
CART SERIALIZERS

Purpose:
- Return a guest cart in a frontend-friendly shape.
- Totals are server-derived (minor units + display strings).
- Shipping is free, so total == subtotal.
"""

from django.conf import settings
from rest_framework import serializers

from cart.models import Cart, CartItem
from products.pricing import format_money


def _currency() -> str:
    return getattr(settings, "STORE_CURRENCY", "INR")


class CartItemSerializer(serializers.ModelSerializer):
    product_id = serializers.UUIDField(read_only=True, allow_null=True)
    line_total = serializers.IntegerField(read_only=True)
    price_display = serializers.SerializerMethodField()
    line_total_display = serializers.SerializerMethodField()
    cover_image = serializers.CharField(read_only=True)

    class Meta:
        model = CartItem
        fields = [
            "id",
            "product_id",
            "name",
            "category",
            "price",
            "price_display",
            "quantity",
            "stock",
            "line_total",
            "line_total_display",
            "images",
            "cover_image",
            "hint",
        ]
        read_only_fields = fields

    def get_price_display(self, obj) -> str:
        return format_money(obj.price, _currency())

    def get_line_total_display(self, obj) -> str:
        return format_money(obj.line_total, _currency())


class CartSerializer(serializers.ModelSerializer):
    """
    Guarantees:
    - items are read-only
    - totals are computed server-side (never trusted from client)
    """

    items = CartItemSerializer(many=True, read_only=True)

    item_count = serializers.SerializerMethodField()
    subtotal = serializers.SerializerMethodField()
    subtotal_display = serializers.SerializerMethodField()
    shipping = serializers.SerializerMethodField()
    total = serializers.SerializerMethodField()
    total_display = serializers.SerializerMethodField()

    class Meta:
        model = Cart
        fields = [
            "id",
            "is_active",
            "items",
            "item_count",
            "subtotal",
            "subtotal_display",
            "shipping",
            "total",
            "total_display",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    # Totals are summed from the prefetched lines to avoid extra queries.
    def _lines(self, obj):
        return list(obj.items.all())

    def get_item_count(self, obj) -> int:
        return sum(int(i.quantity or 0) for i in self._lines(obj))

    def get_subtotal(self, obj) -> int:
        return sum(i.line_total for i in self._lines(obj))

    def get_subtotal_display(self, obj) -> str:
        return format_money(self.get_subtotal(obj), _currency())

    def get_shipping(self, obj) -> str:
        return "Free"

    def get_total(self, obj) -> int:
        return self.get_subtotal(obj)

    def get_total_display(self, obj) -> str:
        return format_money(self.get_total(obj), _currency())


class CartBadgeSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    item_count = serializers.IntegerField()


# =====================================================
# INPUT SERIALIZERS
# =====================================================

class AddCartItemInputSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)


class ChangeQuantityInputSerializer(serializers.Serializer):
    amount = serializers.IntegerField(help_text="Signed change, e.g. 1 or -1.")


class CartMutationResponseSerializer(serializers.Serializer):
    detail = serializers.CharField(allow_blank=True)
    cart = CartSerializer()
