# public/views/catalog.py
"""
PUBLIC CATALOG (STOREFRONT)

GET /api/public/products/                    all products (in-stock first)
GET /api/public/products/<uuid>/             product detail
GET /api/public/products/best-sellers/       up to 4
GET /api/public/products/new-arrivals/       up to 10
GET /api/public/home/                        best sellers + new arrivals
GET /api/public/categories/<slug>/           products in a category
GET /api/public/search/?q=<text>             prefix search (>= 3 chars)

Rules:
- AllowAny (public), read-only
- Throttled to reduce scraping/abuse
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from products.serializers import ProductCardSerializer, ProductSerializer
from products.services import (
    all_products,
    best_sellers,
    get_product,
    new_arrivals,
    products_in_category,
    search_products,
)
from public.serializers import (
    PublicCategoryResponseSerializer,
    PublicHomeResponseSerializer,
    PublicSearchQuerySerializer,
    PublicSearchResponseSerializer,
)


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class PublicSearchThrottle(AnonRateThrottle):
    scope = "public_search"


class PublicCatalogMixin:
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]


class PublicProductListView(PublicCatalogMixin, generics.ListAPIView):
    serializer_class = ProductSerializer
    filter_backends = []

    def get_queryset(self):
        return all_products()

    @extend_schema(tags=["Public"])
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)


class PublicProductDetailView(PublicCatalogMixin, APIView):
    @extend_schema(
        tags=["Public"],
        responses={200: ProductSerializer, 404: OpenApiResponse(description="Product not found")},
    )
    def get(self, request, product_id):
        product = get_product(product_id)
        if product is None:
            return Response({"detail": "Product not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)


class PublicBestSellersView(PublicCatalogMixin, APIView):
    @extend_schema(tags=["Public"], responses={200: ProductSerializer(many=True)})
    def get(self, request):
        return Response(ProductSerializer(best_sellers(), many=True).data)


class PublicNewArrivalsView(PublicCatalogMixin, APIView):
    @extend_schema(tags=["Public"], responses={200: ProductSerializer(many=True)})
    def get(self, request):
        return Response(ProductSerializer(new_arrivals(), many=True).data)


class PublicHomeView(PublicCatalogMixin, APIView):
    @extend_schema(tags=["Public"], responses={200: PublicHomeResponseSerializer})
    def get(self, request):
        return Response(
            {
                "best_sellers": ProductSerializer(best_sellers(), many=True).data,
                "new_arrivals": ProductSerializer(new_arrivals(), many=True).data,
            }
        )


class PublicCategoryView(PublicCatalogMixin, APIView):
    @extend_schema(tags=["Public"], responses={200: PublicCategoryResponseSerializer})
    def get(self, request, slug):
        name, products = products_in_category(slug)
        data = ProductSerializer(products, many=True).data
        return Response({"category": name, "slug": slug, "count": len(data), "results": data})


class PublicSearchView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicSearchThrottle]

    @extend_schema(
        tags=["Public"],
        parameters=[
            OpenApiParameter(
                name="q",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Search text. Fewer than 3 characters returns no results.",
            ),
        ],
        responses={200: PublicSearchResponseSerializer},
    )
    def get(self, request):
        params = PublicSearchQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        query = params.validated_data["q"]

        results = search_products(query)
        return Response(
            {
                "query": query.strip().lower(),
                "count": len(results),
                "results": ProductCardSerializer(results, many=True).data,
            }
        )
