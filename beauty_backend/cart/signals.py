# cart/signals.py

"""
CART CHANGE SIGNAL

cart_changed is sent after every successful cart mutation.

Keyword arguments:
- cart:        the Cart instance
- action:      "add" | "update" | "remove" | "clear" | "checkout"
- item_count:  total units in the cart after the change

Receivers must not raise; the mutation is already committed.
"""

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

cart_changed = Signal()

ACTION_ADD = "add"
ACTION_UPDATE = "update"
ACTION_REMOVE = "remove"
ACTION_CLEAR = "clear"
ACTION_CHECKOUT = "checkout"


def notify_cart_changed(cart, action: str) -> None:
    responses = cart_changed.send_robust(
        sender=cart.__class__,
        cart=cart,
        action=action,
        item_count=cart.item_count,
    )
    for handler, result in responses:
        if isinstance(result, Exception):
            logger.error(
                "cart_changed receiver failed",
                extra={"receiver": getattr(handler, "__name__", repr(handler)), "error": str(result)},
            )


@receiver(cart_changed)
def log_cart_change(sender, cart, action, item_count, **kwargs):
    logger.info(
        "Cart changed",
        extra={"cart_id": str(cart.id), "action": action, "item_count": item_count},
    )
