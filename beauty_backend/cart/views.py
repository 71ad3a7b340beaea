# cart/views.py

"""
GUEST CART API

Endpoints (AllowAny, throttled under the "cart" scope):
- POST   /api/cart/                                  create cart
- GET    /api/cart/<cart_id>/                        cart with lines + totals
- DELETE /api/cart/<cart_id>/                        clear cart
- GET    /api/cart/<cart_id>/count/                  header badge
- POST   /api/cart/<cart_id>/items/                  add product
- PATCH  /api/cart/<cart_id>/items/<product_id>/     change quantity (+/-)
- DELETE /api/cart/<cart_id>/items/<product_id>/     remove line

Errors use the {"error": {"code", "message"}} envelope.
"""

from __future__ import annotations

from django.shortcuts import get_object_or_404
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from cart.models import Cart
from cart.serializers import (
    AddCartItemInputSerializer,
    CartBadgeSerializer,
    CartMutationResponseSerializer,
    CartSerializer,
    ChangeQuantityInputSerializer,
)
from cart.services import add_to_cart, change_quantity, clear_cart, create_cart, remove_item
from cart.services.exceptions import CartError
from products.models import Product


class CartThrottle(AnonRateThrottle):
    scope = "cart"


# =====================================================
# API ERROR NORMALIZATION
# =====================================================

def error_response(*, code: str, message: str, http_status: int):
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )


def cart_error_response(exc: CartError):
    return error_response(code=exc.code, message=exc.message, http_status=exc.status_code)


def _load_cart(cart_id) -> Cart:
    return get_object_or_404(Cart.objects.prefetch_related("items"), pk=cart_id)


def _cart_payload(cart: Cart, message: str = "") -> dict:
    cart = _load_cart(cart.pk)
    return {"detail": message, "cart": CartSerializer(cart).data}


class CartBaseView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    parser_classes = [JSONParser]
    throttle_classes = [CartThrottle]


class CartCreateView(CartBaseView):
    @extend_schema(tags=["Cart"], request=None, responses={201: CartSerializer})
    def post(self, request):
        cart = create_cart()
        return Response(CartSerializer(_load_cart(cart.pk)).data, status=status.HTTP_201_CREATED)


class CartDetailView(CartBaseView):
    @extend_schema(tags=["Cart"], responses={200: CartSerializer, 404: OpenApiResponse(description="Unknown cart")})
    def get(self, request, cart_id):
        return Response(CartSerializer(_load_cart(cart_id)).data)

    @extend_schema(tags=["Cart"], responses={200: CartMutationResponseSerializer})
    def delete(self, request, cart_id):
        cart = _load_cart(cart_id)
        try:
            clear_cart(cart)
        except CartError as exc:
            return cart_error_response(exc)
        return Response(_cart_payload(cart))


class CartCountView(CartBaseView):
    @extend_schema(tags=["Cart"], responses={200: CartBadgeSerializer})
    def get(self, request, cart_id):
        cart = _load_cart(cart_id)
        return Response({"id": cart.id, "item_count": cart.item_count})


class CartItemsView(CartBaseView):
    @extend_schema(
        tags=["Cart"],
        request=AddCartItemInputSerializer,
        responses={
            200: CartMutationResponseSerializer,
            400: OpenApiResponse(description="Out of stock / not enough stock"),
            404: OpenApiResponse(description="Unknown cart or product"),
            409: OpenApiResponse(description="Cart already checked out"),
        },
    )
    def post(self, request, cart_id):
        cart = _load_cart(cart_id)

        body = AddCartItemInputSerializer(data=request.data)
        body.is_valid(raise_exception=True)

        product = Product.objects.filter(pk=body.validated_data["product_id"]).first()
        if product is None:
            return error_response(
                code="product_not_found",
                message="This product could not be found.",
                http_status=status.HTTP_404_NOT_FOUND,
            )

        try:
            result = add_to_cart(cart, product, body.validated_data["quantity"])
        except CartError as exc:
            return cart_error_response(exc)

        return Response(_cart_payload(cart, result.message))


class CartItemDetailView(CartBaseView):
    @extend_schema(
        tags=["Cart"],
        request=ChangeQuantityInputSerializer,
        responses={200: CartMutationResponseSerializer},
    )
    def patch(self, request, cart_id, item_key):
        cart = _load_cart(cart_id)

        body = ChangeQuantityInputSerializer(data=request.data)
        body.is_valid(raise_exception=True)

        try:
            result = change_quantity(cart, item_key, body.validated_data["amount"])
        except CartError as exc:
            return cart_error_response(exc)

        return Response(_cart_payload(cart, result.message))

    @extend_schema(tags=["Cart"], request=None, responses={200: CartMutationResponseSerializer})
    def delete(self, request, cart_id, item_key):
        cart = _load_cart(cart_id)
        try:
            message = remove_item(cart, item_key)
        except CartError as exc:
            return cart_error_response(exc)

        return Response(_cart_payload(cart, message))
