# store/views/store.py

"""
STORE VIEWS

Public:
- GET /api/store/                      profile + active banners + categories

Admin (JWT, store admin):
- GET/PATCH /api/store/profile/
- /api/store/banners/                  banner CRUD (multipart for uploads)
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from products.services.exceptions import ProductServiceError
from public.views.catalog import PublicCatalogThrottle
from store.models import Banner, StoreProfile
from store.serializers import (
    BannerSerializer,
    BannerWriteSerializer,
    StorefrontSerializer,
    StoreProfileSerializer,
)
from store.services import create_banner, delete_banner, storefront, update_banner, update_profile
from users.permissions import IsStoreAdmin


class StorefrontView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(tags=["Store"], responses={200: StorefrontSerializer})
    def get(self, request):
        return Response(StorefrontSerializer(storefront()).data, status=status.HTTP_200_OK)


class StoreProfileView(APIView):
    permission_classes = [IsAuthenticated, IsStoreAdmin]

    @extend_schema(tags=["Store"], responses={200: StoreProfileSerializer})
    def get(self, request):
        return Response(StoreProfileSerializer(StoreProfile.get_solo()).data)

    @extend_schema(tags=["Store"], request=StoreProfileSerializer, responses={200: StoreProfileSerializer})
    def patch(self, request):
        serializer = StoreProfileSerializer(StoreProfile.get_solo(), data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        profile = update_profile(dict(serializer.validated_data))
        return Response(StoreProfileSerializer(profile).data)


class BannerViewSet(viewsets.ModelViewSet):
    """
    Hero banner management.
    """

    queryset = Banner.objects.all().order_by("position", "created_at")
    serializer_class = BannerSerializer
    permission_classes = [IsAuthenticated, IsStoreAdmin]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    pagination_class = None
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    @extend_schema(
        tags=["Store"],
        request=BannerWriteSerializer,
        responses={201: BannerSerializer, 400: OpenApiResponse(description="Validation error")},
    )
    def create(self, request, *args, **kwargs):
        form = BannerWriteSerializer(data=request.data)
        form.is_valid(raise_exception=True)

        try:
            banner = create_banner(**form.validated_data)
        except ProductServiceError as exc:
            return Response({"detail": str(exc)}, status=exc.status_code)

        return Response(BannerSerializer(banner).data, status=status.HTTP_201_CREATED)

    @extend_schema(tags=["Store"], request=BannerWriteSerializer, responses={200: BannerSerializer})
    def partial_update(self, request, *args, **kwargs):
        banner = self.get_object()

        form = BannerWriteSerializer(data=request.data, partial=True)
        form.is_valid(raise_exception=True)

        try:
            banner = update_banner(banner, **form.validated_data)
        except ProductServiceError as exc:
            return Response({"detail": str(exc)}, status=exc.status_code)

        return Response(BannerSerializer(banner).data)

    @extend_schema(tags=["Store"], responses={204: None})
    def destroy(self, request, *args, **kwargs):
        delete_banner(self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)
