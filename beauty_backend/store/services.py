# store/services.py

"""
STORE CUSTOMIZATION SERVICES

- Banner images are stored with the product image helper under "banners/".
- Replacing or deleting a banner removes its old managed image
  (best-effort, warnings only).
"""

from __future__ import annotations

import logging

from django.db import transaction
from django.db.models import Max

from products.categories import CATEGORIES, category_slug
from products.services.images import delete_images_on_commit, upload_image
from store.models import Banner, StoreProfile

logger = logging.getLogger(__name__)

BANNER_IMAGE_FOLDER = "banners"

BANNER_FIELDS = ("alt", "hint", "link_url", "position", "is_active")


def storefront() -> dict:
    return {
        "profile": StoreProfile.get_solo(),
        "banners": list(Banner.objects.filter(is_active=True).order_by("position", "created_at")),
        "categories": [{"name": name, "slug": category_slug(name)} for name in CATEGORIES],
    }


def update_profile(changes: dict) -> StoreProfile:
    profile = StoreProfile.get_solo()
    for field, value in changes.items():
        setattr(profile, field, value)
    profile.save()

    logger.info("Store profile updated", extra={"fields": sorted(changes)})
    return profile


@transaction.atomic
def create_banner(*, image=None, image_url: str = "", **fields) -> Banner:
    url = upload_image(image, folder=BANNER_IMAGE_FOLDER) if image else (image_url or "").strip()

    if "position" not in fields:
        last = Banner.objects.aggregate(m=Max("position"))["m"]
        fields["position"] = 0 if last is None else last + 1

    banner = Banner.objects.create(
        image_url=url,
        **{k: v for k, v in fields.items() if k in BANNER_FIELDS},
    )
    logger.info("Banner created", extra={"banner_id": str(banner.id)})
    return banner


@transaction.atomic
def update_banner(banner: Banner, *, image=None, image_url: str | None = None, **fields) -> Banner:
    old_url = banner.image_url

    if image:
        banner.image_url = upload_image(image, folder=BANNER_IMAGE_FOLDER)
    elif image_url:
        banner.image_url = image_url.strip()

    for field, value in fields.items():
        if field in BANNER_FIELDS:
            setattr(banner, field, value)
    banner.save()

    if banner.image_url != old_url:
        delete_images_on_commit([old_url], folder=BANNER_IMAGE_FOLDER)

    logger.info("Banner updated", extra={"banner_id": str(banner.id)})
    return banner


@transaction.atomic
def delete_banner(banner: Banner) -> None:
    url = banner.image_url
    banner_id = str(banner.id)
    banner.delete()
    delete_images_on_commit([url], folder=BANNER_IMAGE_FOLDER)
    logger.info("Banner deleted", extra={"banner_id": banner_id})
