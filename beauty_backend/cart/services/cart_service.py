# cart/services/cart_service.py

"""
======================================================
PATH: cart/services/cart_service.py
======================================================
GUEST CART SERVICE

Purpose:
- All cart mutations live here (views stay thin).
- Lines are product snapshots; stock checks use the product's live
  quantity at the moment of the write.

Messages (returned to the shopper):
- add:     "<name> (x<qty>) has been added to your cart."
- remove:  "The item has been removed from your cart."
- limits:  "Only <n> more items available." / "Only <n> items available."

Every successful mutation sends cart.signals.cart_changed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q

from cart.models import Cart, CartItem
from cart.services.exceptions import (
    CartInactiveError,
    CartItemNotFoundError,
    InsufficientStockError,
    InvalidQuantityError,
    OutOfStockError,
)
from cart.signals import (
    ACTION_ADD,
    ACTION_CLEAR,
    ACTION_REMOVE,
    ACTION_UPDATE,
    notify_cart_changed,
)
from products.models import Product

logger = logging.getLogger(__name__)

REMOVED_MESSAGE = "The item has been removed from your cart."


@dataclass(frozen=True)
class CartUpdate:
    item: CartItem | None
    message: str = ""
    clamped: bool = False


# -----------------------------
# INTERNALS
# -----------------------------

def _lock_active(cart: Cart) -> Cart:
    locked = Cart.objects.select_for_update().get(pk=cart.pk)
    if not locked.is_active:
        raise CartInactiveError()
    return locked


def _find_line(cart: Cart, key) -> CartItem:
    """A line is addressed by its product id, or by its own id once the product is gone."""
    try:
        return cart.items.select_for_update().get(Q(product_id=key) | Q(id=key))
    except (CartItem.DoesNotExist, ValueError, ValidationError):
        raise CartItemNotFoundError()


def _snapshot(product: Product) -> dict:
    return {
        "name": product.name,
        "price": product.price,
        "images": list(product.images or []),
        "category": product.category,
        "hint": product.hint,
        "stock": product.quantity,
    }


def _added_message(name: str, quantity: int) -> str:
    return f"{name} (x{quantity}) has been added to your cart."


# =====================================================
# PUBLIC API
# =====================================================

def create_cart() -> Cart:
    cart = Cart.objects.create()
    logger.info("Cart created", extra={"cart_id": str(cart.id)})
    return cart


def item_count(cart: Cart) -> int:
    return cart.item_count


def subtotal(cart: Cart) -> int:
    return cart.subtotal


def add_to_cart(cart: Cart, product: Product, quantity: int = 1) -> CartUpdate:
    quantity = int(quantity)
    if quantity < 1:
        raise InvalidQuantityError()

    with transaction.atomic():
        cart = _lock_active(cart)
        product = Product.objects.select_for_update().get(pk=product.pk)
        stock = int(product.quantity or 0)

        if stock == 0:
            raise OutOfStockError(f"{product.name} is out of stock.")

        line = cart.items.select_for_update().filter(product=product).first()

        if line is not None:
            new_total = line.quantity + quantity
            if new_total > stock:
                raise InsufficientStockError(
                    f"Only {stock - line.quantity} more items available.",
                    available=max(stock - line.quantity, 0),
                    product_name=product.name,
                )
            for field, value in _snapshot(product).items():
                setattr(line, field, value)
            line.quantity = new_total
            line.save()
        else:
            if quantity > stock:
                raise InsufficientStockError(
                    f"Only {stock} items available.",
                    available=stock,
                    product_name=product.name,
                )
            line = CartItem.objects.create(cart=cart, product=product, quantity=quantity, **_snapshot(product))

        cart.save(update_fields=["updated_at"])

    notify_cart_changed(cart, ACTION_ADD)
    return CartUpdate(item=line, message=_added_message(product.name, quantity))


def change_quantity(cart: Cart, key, amount: int) -> CartUpdate:
    """
    Apply +/- amount to a line.

    - below 1: line unchanged
    - above stock: clamp to stock, report "Only <stock> items available."
    """
    amount = int(amount)

    with transaction.atomic():
        cart = _lock_active(cart)
        line = _find_line(cart, key)

        if line.product_id is not None:
            line.stock = int(
                Product.objects.filter(pk=line.product_id).values_list("quantity", flat=True).first() or 0
            )

        requested = line.quantity + amount
        if requested < 1:
            return CartUpdate(item=line)

        if line.stock < 1:
            raise OutOfStockError(f"{line.name} is out of stock.")

        clamped = requested > line.stock
        line.quantity = line.stock if clamped else requested
        line.save()
        cart.save(update_fields=["updated_at"])

    notify_cart_changed(cart, ACTION_UPDATE)
    message = f"Only {line.stock} items available." if clamped else ""
    return CartUpdate(item=line, message=message, clamped=clamped)


def remove_item(cart: Cart, key) -> str:
    with transaction.atomic():
        cart = _lock_active(cart)
        line = _find_line(cart, key)
        line.delete()
        cart.save(update_fields=["updated_at"])

    notify_cart_changed(cart, ACTION_REMOVE)
    return REMOVED_MESSAGE


def clear_cart(cart: Cart) -> None:
    with transaction.atomic():
        cart = _lock_active(cart)
        cart.items.all().delete()
        cart.save(update_fields=["updated_at"])

    notify_cart_changed(cart, ACTION_CLEAR)
