# public/services/whatsapp.py

"""
======================================================
PATH: public/services/whatsapp.py
======================================================
WHATSAPP HAND-OFF

Builds the plain-text order message and the click-to-chat link:

    https://wa.me/<digits>?text=<url-encoded message>

The number comes from the store profile, falling back to
settings.STORE_WHATSAPP_NUMBER.
"""

from __future__ import annotations

import re
from urllib.parse import quote

from django.conf import settings

from products.pricing import format_money
from store.models import StoreProfile

WA_BASE_URL = "https://wa.me"


class WhatsAppNotConfigured(Exception):
    """No WhatsApp number is configured for the store."""


def digits_only(number: str) -> str:
    return re.sub(r"\D", "", number or "")


def store_whatsapp_number() -> str:
    profile = StoreProfile.get_solo()
    number = (profile.whatsapp_number or "").strip()
    return number or (getattr(settings, "STORE_WHATSAPP_NUMBER", "") or "").strip()


def whatsapp_url(number: str, message: str) -> str:
    digits = digits_only(number)
    if not digits:
        raise WhatsAppNotConfigured("Store WhatsApp number is not configured")
    return f"{WA_BASE_URL}/{digits}?text={quote(message, safe='')}"


def build_order_message(
    *,
    store_name: str,
    reference: str,
    lines: list[dict],
    subtotal: int,
    currency: str = "INR",
    customer_name: str = "",
    customer_phone: str = "",
    note: str = "",
) -> str:
    """
    lines: [{"name", "quantity", "line_total"}] in cart order.
    """
    out = [
        f"Hello {store_name}! I would like to place an order.",
        "",
        f"Order reference: {reference}",
        "",
    ]

    for idx, line in enumerate(lines, start=1):
        out.append(
            f"{idx}. {line['name']} x{line['quantity']} - {format_money(line['line_total'], currency)}"
        )

    out += [
        "",
        f"Subtotal: {format_money(subtotal, currency)}",
        "Shipping: Free",
        f"Total: {format_money(subtotal, currency)}",
    ]

    details = []
    if customer_name:
        details.append(f"Name: {customer_name}")
    if customer_phone:
        details.append(f"Phone: {customer_phone}")
    if note:
        details.append(f"Note: {note}")
    if details:
        out += [""] + details

    return "\n".join(out)
