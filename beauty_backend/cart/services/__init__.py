from .cart_service import (
    CartUpdate,
    add_to_cart,
    change_quantity,
    clear_cart,
    create_cart,
    item_count,
    remove_item,
    subtotal,
)

__all__ = [
    "CartUpdate",
    "add_to_cart",
    "change_quantity",
    "clear_cart",
    "create_cart",
    "item_count",
    "remove_item",
    "subtotal",
]
