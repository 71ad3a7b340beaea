from .store import (
    BannerSerializer,
    BannerWriteSerializer,
    StorefrontSerializer,
    StoreProfileSerializer,
)

__all__ = [
    "BannerSerializer",
    "BannerWriteSerializer",
    "StoreProfileSerializer",
    "StorefrontSerializer",
]
