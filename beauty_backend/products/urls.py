# products/urls.py

"""
PRODUCTS URLS

Purpose:
- Admin inventory routes under /api/products/
    /products/                 ProductViewSet
    /products/<id>/best-seller/
    /categories/               fixed category list (AllowAny)
    /dashboard/                admin summary
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from products.views import CategoryListView, DashboardView, ProductViewSet

app_name = "products"

router = DefaultRouter()
router.register(r"products", ProductViewSet, basename="products")

urlpatterns = [
    path("categories/", CategoryListView.as_view(), name="categories"),
    path("dashboard/", DashboardView.as_view(), name="dashboard"),
    path("", include(router.urls)),
]
