"""
PROJECT URLS

Everything is served under /api/:

    /api/public/    catalog, search, checkout hand-off, contact   (anonymous)
    /api/cart/      guest cart keyed by cart id                    (anonymous)
    /api/store/     storefront profile + hero banners              (read: anonymous)
    /api/products/  inventory, categories, dashboard               (admin JWT)
    /api/auth/      login, logout, me, password                    (admin JWT)

/api/health/ reports database reachability. The Django admin lives at
ADMIN_PATH so it can be moved off the default path in production.
"""

from __future__ import annotations

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.db import connection
from django.db.utils import OperationalError
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.utils import OpenApiResponse, extend_schema, inline_serializer
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework import serializers, status
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

MODULES = {
    "public": "/api/public/",
    "cart": "/api/cart/",
    "store": "/api/store/",
    "products": "/api/products/",
    "auth": "/api/auth/",
}

_health = inline_serializer(
    name="HealthStatus",
    fields={
        "status": serializers.CharField(),
        "db": serializers.CharField(),
        "error": serializers.CharField(required=False),
    },
)


@extend_schema(
    tags=["Meta"],
    responses=inline_serializer(
        name="ApiIndex",
        fields={
            "store": serializers.CharField(),
            "modules": serializers.DictField(child=serializers.CharField()),
            "docs": serializers.CharField(),
            "schema": serializers.CharField(),
        },
    ),
)
@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "store": settings.STORE_NAME,
            "modules": MODULES,
            "docs": "/api/docs/",
            "schema": "/api/schema/",
        }
    )


@extend_schema(
    tags=["Meta"],
    responses={200: _health, 503: OpenApiResponse(_health, description="Database unreachable")},
)
@api_view(["GET"])
@permission_classes([AllowAny])
@throttle_classes([])
def health_check(request):
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except OperationalError as exc:
        return Response(
            {"status": "degraded", "db": "down", "error": str(exc)},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return Response({"status": "ok", "db": "ok"})


ADMIN_PATH = getattr(settings, "ADMIN_PATH", "admin/").rstrip("/") + "/"

api_urlpatterns = [
    path("", api_root, name="api-root"),
    path("health/", health_check, name="health-check"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("auth/jwt/create/", TokenObtainPairView.as_view(), name="jwt-create"),
    path("auth/jwt/refresh/", TokenRefreshView.as_view(), name="jwt-refresh"),
    path("auth/", include("users.urls")),
    path("products/", include("products.urls")),
    path("store/", include("store.urls")),
    path("cart/", include("cart.urls")),
    path("public/", include("public.urls")),
]

urlpatterns = [
    path(ADMIN_PATH, admin.site.urls),
    path("", RedirectView.as_view(url="/api/docs/", permanent=False), name="root"),
    path("api/", include(api_urlpatterns)),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
