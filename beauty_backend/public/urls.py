# public/urls.py
"""
PUBLIC API URLS (STOREFRONT)

Base path (mounted in backend/urls.py):
    /api/public/
"""

from __future__ import annotations

from django.urls import path

from public.views.catalog import (
    PublicBestSellersView,
    PublicCategoryView,
    PublicHomeView,
    PublicNewArrivalsView,
    PublicProductDetailView,
    PublicProductListView,
    PublicSearchView,
)
from public.views.checkout import PublicCheckoutView, PublicContactView

app_name = "public"

urlpatterns = [
    # Catalog
    path("home/", PublicHomeView.as_view(), name="home"),
    path("products/", PublicProductListView.as_view(), name="products"),
    path("products/best-sellers/", PublicBestSellersView.as_view(), name="best-sellers"),
    path("products/new-arrivals/", PublicNewArrivalsView.as_view(), name="new-arrivals"),
    path("products/<uuid:product_id>/", PublicProductDetailView.as_view(), name="product-detail"),
    path("categories/<slug:slug>/", PublicCategoryView.as_view(), name="category"),
    path("search/", PublicSearchView.as_view(), name="search"),

    # Checkout hand-off + contact
    path("checkout/", PublicCheckoutView.as_view(), name="checkout"),
    path("contact/", PublicContactView.as_view(), name="contact"),
]
