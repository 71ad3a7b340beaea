# PATH: public/serializers.py

"""
PATH: public/serializers.py

PUBLIC SERIALIZERS (STOREFRONT)

Purpose:
- Shared request/response contracts for the public API.
- Transport layer only: they validate shapes and field rules,
  business rules live in public/services.
"""

from __future__ import annotations

from rest_framework import serializers

from products.serializers import ProductCardSerializer, ProductSerializer
from products.services.search import MIN_QUERY_LENGTH


class PublicSearchQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, default="", max_length=100)


class PublicSearchResponseSerializer(serializers.Serializer):
    query = serializers.CharField()
    min_length = serializers.IntegerField(default=MIN_QUERY_LENGTH)
    count = serializers.IntegerField()
    results = ProductCardSerializer(many=True)


class PublicCategoryResponseSerializer(serializers.Serializer):
    category = serializers.CharField(allow_null=True)
    slug = serializers.CharField()
    count = serializers.IntegerField()
    results = ProductSerializer(many=True)


class PublicHomeResponseSerializer(serializers.Serializer):
    best_sellers = ProductSerializer(many=True)
    new_arrivals = ProductSerializer(many=True)


class PublicCheckoutInputSerializer(serializers.Serializer):
    cart_id = serializers.UUIDField()
    customer_name = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
    customer_phone = serializers.CharField(required=False, allow_blank=True, default="", max_length=64)
    note = serializers.CharField(required=False, allow_blank=True, default="", max_length=500)


class PublicCheckoutLineSerializer(serializers.Serializer):
    product_id = serializers.CharField()
    name = serializers.CharField()
    quantity = serializers.IntegerField()
    price = serializers.IntegerField()
    line_total = serializers.IntegerField()


class PublicCheckoutResponseSerializer(serializers.Serializer):
    reference = serializers.CharField()
    whatsapp_url = serializers.CharField()
    message = serializers.CharField()
    currency = serializers.CharField()
    items = PublicCheckoutLineSerializer(many=True)
    item_count = serializers.IntegerField()
    subtotal = serializers.IntegerField()
    total = serializers.IntegerField()
    total_display = serializers.CharField()
    created_at = serializers.DateTimeField()


class PublicContactSerializer(serializers.Serializer):
    name = serializers.CharField(
        min_length=2,
        max_length=120,
        error_messages={"min_length": "Name must be at least 2 characters."},
    )
    email = serializers.EmailField(error_messages={"invalid": "Please enter a valid email address."})
    subject = serializers.CharField(
        min_length=5,
        max_length=200,
        error_messages={"min_length": "Subject must be at least 5 characters."},
    )
    message = serializers.CharField(
        min_length=10,
        max_length=500,
        error_messages={
            "min_length": "Message must be at least 10 characters.",
            "max_length": "Message must not be longer than 500 characters.",
        },
    )
