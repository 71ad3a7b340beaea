# products/views/product.py

"""
PRODUCT VIEWSET (ADMIN CONSOLE)

Endpoints (JWT, store admin only):
- GET    /api/products/products/                 inventory table (filters, paging)
- POST   /api/products/products/                 add product (multipart or JSON)
- GET    /api/products/products/<id>/            edit form
- PATCH  /api/products/products/<id>/            edit (+ image reconciliation)
- DELETE /api/products/products/<id>/            delete (+ best-effort image cleanup)
- POST   /api/products/products/<id>/best-seller/

All writes go through products.services.inventory.
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from products.filters import ProductFilter
from products.serializers import (
    BestSellerToggleSerializer,
    ProductSerializer,
    ProductWriteSerializer,
)
from products.services import (
    all_products,
    create_product,
    delete_product,
    set_best_seller,
    update_product,
)
from products.services.exceptions import ProductServiceError
from users.permissions import IsStoreAdmin

logger = logging.getLogger(__name__)


def _as_drf_error(exc: DjangoValidationError) -> ValidationError:
    if hasattr(exc, "message_dict"):
        return ValidationError(exc.message_dict)
    return ValidationError({"detail": exc.messages})


def _keep_images_from(request, validated: dict):
    """
    None  -> client did not send keep_images (images untouched)
    []    -> client sent an empty marker (drop every current image)
    """
    if "keep_images" not in request.data:
        return None
    return [url for url in validated.get("keep_images") or [] if url]


class ProductViewSet(viewsets.ModelViewSet):
    """
    Product endpoints for the admin inventory.
    """

    serializer_class = ProductSerializer
    permission_classes = [IsAuthenticated, IsStoreAdmin]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    filterset_class = ProductFilter
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    def get_queryset(self):
        return all_products()

    # -----------------------------
    # CREATE
    # -----------------------------
    @extend_schema(
        tags=["Products"],
        request=ProductWriteSerializer,
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(description="Validation error"),
            502: OpenApiResponse(description="Image storage failed"),
        },
    )
    def create(self, request, *args, **kwargs):
        form = ProductWriteSerializer(data=request.data)
        form.is_valid(raise_exception=True)
        data = form.validated_data

        try:
            product = create_product(
                **form.to_service_kwargs(),
                image_files=data.get("images") or [],
                image_url=data.get("image_url") or None,
            )
        except DjangoValidationError as exc:
            raise _as_drf_error(exc)
        except ProductServiceError as exc:
            return self._service_error(exc)

        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    # -----------------------------
    # UPDATE
    # -----------------------------
    @extend_schema(
        tags=["Products"],
        request=ProductWriteSerializer,
        responses={
            200: ProductSerializer,
            400: OpenApiResponse(description="Validation error"),
            404: OpenApiResponse(description="Product not found"),
            502: OpenApiResponse(description="Image storage failed"),
        },
    )
    def partial_update(self, request, *args, **kwargs):
        product = self.get_object()

        form = ProductWriteSerializer(data=request.data, partial=True)
        form.is_valid(raise_exception=True)
        data = form.validated_data

        try:
            product = update_product(
                product,
                changes=form.to_service_kwargs(),
                keep_images=_keep_images_from(request, data),
                new_files=data.get("images") or [],
            )
        except DjangoValidationError as exc:
            raise _as_drf_error(exc)
        except ProductServiceError as exc:
            return self._service_error(exc)

        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)

    # -----------------------------
    # DELETE
    # -----------------------------
    @extend_schema(tags=["Products"], responses={204: None, 404: OpenApiResponse(description="Not found")})
    def destroy(self, request, *args, **kwargs):
        delete_product(self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)

    # -----------------------------
    # BEST SELLER TOGGLE
    # -----------------------------
    @extend_schema(
        tags=["Products"],
        request=BestSellerToggleSerializer,
        responses={200: ProductSerializer},
    )
    @action(detail=True, methods=["post"], url_path="best-seller")
    def best_seller(self, request, pk=None):
        product = self.get_object()

        body = BestSellerToggleSerializer(data=request.data)
        body.is_valid(raise_exception=True)

        product = set_best_seller(product, body.validated_data["is_best_seller"])
        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)

    def _service_error(self, exc: ProductServiceError) -> Response:
        logger.warning("Product write failed", extra={"error": str(exc)})
        return Response(
            {"detail": str(exc)},
            status=getattr(exc, "status_code", status.HTTP_400_BAD_REQUEST),
        )
