# public/services/checkout.py

"""
======================================================
PATH: public/services/checkout.py
======================================================
CHECKOUT (WHATSAPP HAND-OFF)

Flow:
1. lock the cart (must be active + non-empty)
2. re-check every line against live product stock
   - product deleted        -> 409
   - quantity > live stock  -> 409 (names product + available quantity)
3. refresh line prices from the live product
4. build message + wa.me link, record CheckoutHandoff
5. deactivate the cart, emit cart_changed("checkout")

Stock is NOT decremented; the shop confirms the order in chat.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.db import transaction

from cart.models import Cart
from cart.services.exceptions import CartError, CartInactiveError, EmptyCartError
from cart.signals import ACTION_CHECKOUT, notify_cart_changed
from products.models import Product
from public.models import CheckoutHandoff
from public.services.whatsapp import (
    WhatsAppNotConfigured,
    build_order_message,
    store_whatsapp_number,
    whatsapp_url,
)
from store.models import StoreProfile

logger = logging.getLogger(__name__)


class StockConflictError(CartError):
    """Some items are no longer available in the requested quantity."""

    code = "stock_conflict"
    status_code = 409

    def __init__(self, message: str = "", *, product_id=None, product_name: str = "", available: int = 0):
        super().__init__(message)
        self.product_id = product_id
        self.product_name = product_name
        self.available = available


class CheckoutUnavailableError(CartError):
    """Checkout is temporarily unavailable."""

    code = "checkout_unavailable"
    status_code = 503


@transaction.atomic
def checkout_cart(
    cart: Cart,
    *,
    customer_name: str = "",
    customer_phone: str = "",
    note: str = "",
) -> CheckoutHandoff:
    cart = Cart.objects.select_for_update().get(pk=cart.pk)
    if not cart.is_active:
        raise CartInactiveError()

    items = list(cart.items.select_related("product").order_by("created_at"))
    if not items:
        raise EmptyCartError()

    product_ids = [i.product_id for i in items if i.product_id]
    live = {p.pk: p for p in Product.objects.select_for_update().filter(pk__in=product_ids)}

    lines = []
    for item in items:
        product = live.get(item.product_id)
        if product is None:
            raise StockConflictError(
                f"{item.name} is no longer available.",
                product_name=item.name,
                available=0,
            )

        available = int(product.quantity or 0)
        if item.quantity > available:
            raise StockConflictError(
                f"Only {available} of {product.name} available.",
                product_id=product.pk,
                product_name=product.name,
                available=available,
            )

        if item.price != product.price or item.stock != available:
            item.price = product.price
            item.stock = available
            item.save(update_fields=["price", "stock", "updated_at"])

        lines.append(
            {
                "product_id": str(product.pk),
                "name": item.name,
                "quantity": item.quantity,
                "price": item.price,
                "line_total": item.line_total,
            }
        )

    subtotal = sum(line["line_total"] for line in lines)

    profile = StoreProfile.get_solo()
    currency = profile.currency or getattr(settings, "STORE_CURRENCY", "INR")
    reference = CheckoutHandoff.new_reference()

    message = build_order_message(
        store_name=profile.name,
        reference=reference,
        lines=lines,
        subtotal=subtotal,
        currency=currency,
        customer_name=customer_name.strip(),
        customer_phone=customer_phone.strip(),
        note=note.strip(),
    )

    try:
        url = whatsapp_url(store_whatsapp_number(), message)
    except WhatsAppNotConfigured as exc:
        logger.error("Checkout attempted without a WhatsApp number", extra={"cart_id": str(cart.id)})
        raise CheckoutUnavailableError() from exc

    handoff = CheckoutHandoff.objects.create(
        reference=reference,
        cart=cart,
        currency=currency,
        items=lines,
        subtotal=subtotal,
        total=subtotal,
        customer_name=customer_name.strip(),
        customer_phone=customer_phone.strip(),
        note=note.strip(),
        message=message,
        whatsapp_url=url,
    )

    cart.is_active = False
    cart.save(update_fields=["is_active", "updated_at"])

    logger.info(
        "Checkout hand-off created",
        extra={
            "reference": handoff.reference,
            "cart_id": str(cart.id),
            "lines": len(lines),
            "total": subtotal,
        },
    )

    transaction.on_commit(lambda: notify_cart_changed(cart, ACTION_CHECKOUT))
    return handoff
