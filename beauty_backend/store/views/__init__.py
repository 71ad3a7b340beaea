from .store import BannerViewSet, StorefrontView, StoreProfileView

__all__ = ["BannerViewSet", "StoreProfileView", "StorefrontView"]
