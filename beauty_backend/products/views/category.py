# products/views/category.py

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from products.categories import CATEGORIES, category_slug
from products.serializers import CategorySerializer, DashboardSerializer
from products.services import dashboard_summary
from users.permissions import IsStoreAdmin


def category_payload() -> list[dict]:
    return [{"name": name, "slug": category_slug(name)} for name in CATEGORIES]


class CategoryListView(APIView):
    """
    Fixed category list.

    Used by the admin product form dropdown and the storefront navigation,
    so it is readable without a token.
    """

    permission_classes = [AllowAny]

    @extend_schema(tags=["Products"], responses={200: CategorySerializer(many=True)})
    def get(self, request):
        return Response(CategorySerializer(category_payload(), many=True).data)


class DashboardView(APIView):
    """
    GET /api/products/dashboard/

    Summary cards + products-per-category chart for the admin home page.
    """

    permission_classes = [IsAuthenticated, IsStoreAdmin]

    @extend_schema(tags=["Products"], responses={200: DashboardSerializer})
    def get(self, request):
        return Response(DashboardSerializer(dashboard_summary()).data)
