# products/pricing.py

"""
MONEY HELPERS

Prices are stored as integers in minor units (paise for INR). The admin
form sends major units ("59.99"); the storefront shows "₹59.99".
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

TWOPLACES = Decimal("0.01")

# ₹1 crore; line totals (price x stock) stay inside a bigint column.
MAX_PRICE = Decimal("10000000.00")
MAX_PRICE_MINOR = 1_000_000_000

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def to_minor_units(amount) -> int:
    """Convert a major-unit amount ("59.99") to minor units (5999)."""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValueError(f"Invalid amount: {amount!r}") from exc
    return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_major_units(minor: int) -> Decimal:
    return (Decimal(int(minor or 0)) / Decimal(100)).quantize(TWOPLACES)


def _group_indian(digits: str) -> str:
    # 1234567 -> 12,34,567 (last three, then pairs)
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def _group_western(digits: str) -> str:
    return f"{int(digits):,}"


def format_money(minor: int, currency: str = "INR") -> str:
    """
    Render minor units the way the storefront displays prices.

    INR uses Indian digit grouping (₹1,00,000.00); other currencies use
    thousands grouping.
    """
    amount = to_major_units(minor)
    sign = "-" if amount < 0 else ""
    whole, _, frac = f"{abs(amount):.2f}".partition(".")

    code = (currency or "INR").upper()
    grouped = _group_indian(whole) if code == "INR" else _group_western(whole)
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    return f"{sign}{symbol}{grouped}.{frac}"
