# public/views/checkout.py
"""
PUBLIC CHECKOUT + CONTACT (STOREFRONT)

POST /api/public/checkout/
- body: {cart_id, customer_name?, customer_phone?, note?}
- 201: {reference, whatsapp_url, message, items, totals...}
- 400 empty cart, 404 unknown cart, 409 cart closed or stock conflict

POST /api/public/contact/
- body: {name, email, subject, message}
- 201: {"detail": "Thank you for your message. We will get back to you soon."}

Security hardening:
- Throttle (public_write) because both are write endpoints (abuse target)
"""

from __future__ import annotations

from django.conf import settings
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from cart.models import Cart
from cart.services.exceptions import CartError
from cart.views import error_response
from products.pricing import format_money
from public.serializers import (
    PublicCheckoutInputSerializer,
    PublicCheckoutResponseSerializer,
    PublicContactSerializer,
)
from public.services.checkout import StockConflictError, checkout_cart
from public.services.contact import CONTACT_THANKS, submit_contact_message


class PublicWriteThrottle(AnonRateThrottle):
    scope = "public_write"


def _handoff_payload(handoff) -> dict:
    currency = handoff.currency or getattr(settings, "STORE_CURRENCY", "INR")
    return {
        "reference": handoff.reference,
        "whatsapp_url": handoff.whatsapp_url,
        "message": handoff.message,
        "currency": currency,
        "items": handoff.items,
        "item_count": handoff.item_count,
        "subtotal": handoff.subtotal,
        "total": handoff.total,
        "total_display": format_money(handoff.total, currency),
        "created_at": handoff.created_at,
    }


class PublicCheckoutView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    parser_classes = [JSONParser]
    throttle_classes = [PublicWriteThrottle]

    @extend_schema(
        tags=["Public"],
        request=PublicCheckoutInputSerializer,
        responses={
            201: PublicCheckoutResponseSerializer,
            400: OpenApiResponse(description="Empty cart / validation error"),
            404: OpenApiResponse(description="Unknown cart"),
            409: OpenApiResponse(description="Cart already checked out or stock conflict"),
        },
        description="Validate the cart against live stock and return a WhatsApp hand-off link.",
    )
    def post(self, request):
        body = PublicCheckoutInputSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        data = body.validated_data

        cart = get_object_or_404(Cart, pk=data["cart_id"])

        try:
            handoff = checkout_cart(
                cart,
                customer_name=data["customer_name"],
                customer_phone=data["customer_phone"],
                note=data["note"],
            )
        except StockConflictError as exc:
            return Response(
                {
                    "error": {
                        "code": exc.code,
                        "message": exc.message,
                        "product_id": str(exc.product_id) if exc.product_id else None,
                        "product_name": exc.product_name,
                        "available": exc.available,
                    }
                },
                status=exc.status_code,
            )
        except CartError as exc:
            return error_response(code=exc.code, message=exc.message, http_status=exc.status_code)

        return Response(
            PublicCheckoutResponseSerializer(_handoff_payload(handoff)).data,
            status=status.HTTP_201_CREATED,
        )


class PublicContactView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    parser_classes = [JSONParser]
    throttle_classes = [PublicWriteThrottle]

    @extend_schema(
        tags=["Public"],
        request=PublicContactSerializer,
        responses={201: OpenApiResponse(description="Message stored"), 400: OpenApiResponse(description="Validation error")},
    )
    def post(self, request):
        body = PublicContactSerializer(data=request.data)
        body.is_valid(raise_exception=True)

        submit_contact_message(**body.validated_data)
        return Response({"detail": CONTACT_THANKS}, status=status.HTTP_201_CREATED)
