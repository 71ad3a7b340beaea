# products/filters.py

import django_filters
from django.conf import settings

from products.categories import CATEGORY_CHOICES
from products.models import Product

STOCK_IN = "in"
STOCK_OUT = "out"
STOCK_LOW = "low"


class ProductFilter(django_filters.FilterSet):
    """
    Inventory table filters:
        ?category=Lips&is_best_seller=true&stock=low&q=matte
    """

    category = django_filters.ChoiceFilter(choices=CATEGORY_CHOICES)
    is_best_seller = django_filters.BooleanFilter()
    stock = django_filters.ChoiceFilter(
        method="filter_stock",
        choices=[(STOCK_IN, "In stock"), (STOCK_OUT, "Out of stock"), (STOCK_LOW, "Low stock")],
    )
    q = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = Product
        fields = ["category", "is_best_seller"]

    def filter_stock(self, queryset, name, value):
        if value == STOCK_OUT:
            return queryset.filter(quantity=0)
        if value == STOCK_LOW:
            threshold = int(getattr(settings, "LOW_STOCK_THRESHOLD", 5))
            return queryset.filter(quantity__gt=0, quantity__lte=threshold)
        return queryset.filter(quantity__gt=0)
