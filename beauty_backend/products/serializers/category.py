# products/serializers/category.py

from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    """Fixed category list entry (name + URL slug)."""

    name = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)


class CategoryChartEntrySerializer(serializers.Serializer):
    name = serializers.CharField(read_only=True)
    total = serializers.IntegerField(read_only=True)


class DashboardSerializer(serializers.Serializer):
    total_products = serializers.IntegerField()
    out_of_stock = serializers.IntegerField()
    low_stock = serializers.IntegerField()
    low_stock_threshold = serializers.IntegerField()
    best_sellers = serializers.IntegerField()
    stock_value = serializers.IntegerField()
    stock_value_display = serializers.CharField()
    chart = CategoryChartEntrySerializer(many=True)
