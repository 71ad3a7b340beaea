from .checkout import CheckoutHandoff
from .contact import ContactMessage

__all__ = ["CheckoutHandoff", "ContactMessage"]
