# store/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from store.views import BannerViewSet, StorefrontView, StoreProfileView

app_name = "store"

router = SimpleRouter()
router.register(r"banners", BannerViewSet, basename="banners")

urlpatterns = [
    path("", StorefrontView.as_view(), name="storefront"),
    path("profile/", StoreProfileView.as_view(), name="profile"),
    path("", include(router.urls)),
]
