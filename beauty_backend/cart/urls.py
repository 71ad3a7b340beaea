# cart/urls.py

from django.urls import path

from cart.views import (
    CartCountView,
    CartCreateView,
    CartDetailView,
    CartItemDetailView,
    CartItemsView,
)

app_name = "cart"

urlpatterns = [
    path("", CartCreateView.as_view(), name="create"),
    path("<uuid:cart_id>/", CartDetailView.as_view(), name="detail"),
    path("<uuid:cart_id>/count/", CartCountView.as_view(), name="count"),
    path("<uuid:cart_id>/items/", CartItemsView.as_view(), name="items"),
    path("<uuid:cart_id>/items/<uuid:item_key>/", CartItemDetailView.as_view(), name="item-detail"),
]
