from .banner import Banner
from .profile import StoreProfile

__all__ = ["Banner", "StoreProfile"]
