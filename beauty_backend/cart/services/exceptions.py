# cart/services/exceptions.py


class CartError(Exception):
    """Base error for cart operations. Carries a stable code + HTTP status."""

    code = "cart_error"
    status_code = 400

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message or self.__class__.__doc__ or ""


class CartInactiveError(CartError):
    """This cart has already been checked out."""

    code = "cart_inactive"
    status_code = 409


class EmptyCartError(CartError):
    """Your cart is empty."""

    code = "cart_empty"
    status_code = 400


class OutOfStockError(CartError):
    """This product is out of stock."""

    code = "out_of_stock"
    status_code = 400


class InsufficientStockError(CartError):
    """Not enough stock."""

    code = "insufficient_stock"
    status_code = 400

    def __init__(self, message: str = "", *, available: int = 0, product_name: str = ""):
        super().__init__(message)
        self.available = available
        self.product_name = product_name


class CartItemNotFoundError(CartError):
    """This item is not in your cart."""

    code = "item_not_found"
    status_code = 404


class InvalidQuantityError(CartError):
    """Quantity must be at least 1."""

    code = "invalid_quantity"
    status_code = 400
