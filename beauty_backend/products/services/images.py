# products/services/images.py

"""
======================================================
PATH: products/services/images.py
======================================================
IMAGE STORAGE SERVICE

Purpose:
- Store uploaded images through Django's storage API (default_storage),
  so local disk, S3 or GCS is a settings change.
- Object names: "<folder>/<uuid4>-<original filename>".
- Recognise URLs that point into OUR storage ("managed" URLs). Only those
  are ever deleted; placeholders and third-party URLs are left alone.

Rules:
- Upload failures raise ImageUploadError (the write is aborted).
- Delete failures are logged as warnings and reported as False.
- Deletes tied to a DB write run after commit (delete_images_on_commit).
"""

from __future__ import annotations

import logging
import os
import uuid
from functools import partial
from urllib.parse import quote, unquote

from django.conf import settings
from django.core.files.storage import default_storage
from django.db import transaction
from django.utils.text import get_valid_filename

from products.services.exceptions import ImageUploadError, InvalidImageError

logger = logging.getLogger(__name__)

PRODUCT_IMAGE_FOLDER = "products"

ALLOWED_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".gif", ".avif"}
MAX_IMAGE_BYTES = 5 * 1024 * 1024


def placeholder_image_url(text: str, size: str = "400x400") -> str:
    base = getattr(settings, "PLACEHOLDER_IMAGE_BASE", "https://placehold.co")
    return f"{base}/{size}.png?text={quote(text or '', safe='')}"


def _validate_image(file) -> str:
    filename = os.path.basename(getattr(file, "name", "") or "")
    if not filename:
        raise InvalidImageError("Uploaded file has no name")

    ext = os.path.splitext(filename)[1].lower()
    content_type = (getattr(file, "content_type", "") or "").lower()

    if ext not in ALLOWED_IMAGE_EXTENSIONS:
        raise InvalidImageError(f"{filename}: unsupported image type")
    if content_type and not content_type.startswith("image/"):
        raise InvalidImageError(f"{filename}: not an image ({content_type})")

    size = getattr(file, "size", None)
    if size is not None and size > MAX_IMAGE_BYTES:
        raise InvalidImageError(f"{filename}: image is larger than 5 MB")

    return get_valid_filename(filename)


def upload_image(file, *, folder: str = PRODUCT_IMAGE_FOLDER) -> str:
    """Store one image and return its public URL."""
    safe_name = _validate_image(file)
    object_name = f"{folder}/{uuid.uuid4()}-{safe_name}"

    try:
        saved_name = default_storage.save(object_name, file)
    except OSError as exc:
        logger.error("Image upload failed", extra={"object_name": object_name})
        raise ImageUploadError(f"Could not store {safe_name}") from exc

    url = default_storage.url(saved_name)
    logger.info("Image stored", extra={"object_name": saved_name})
    return url


def upload_images(files, *, folder: str = PRODUCT_IMAGE_FOLDER) -> list[str]:
    """
    Upload files in order. If one fails, the ones already stored in this
    call are removed again before the error propagates.
    """
    uploaded: list[str] = []
    try:
        for f in files or []:
            uploaded.append(upload_image(f, folder=folder))
    except ImageUploadError:
        for url in uploaded:
            delete_image(url, folder=folder)
        raise
    return uploaded


def storage_name_for_url(url: str, *, folder: str = PRODUCT_IMAGE_FOLDER) -> str | None:
    """Map a managed URL back to its storage object name, else None."""
    if not url:
        return None

    base = default_storage.url("")
    if not base or not url.startswith(base):
        return None

    name = unquote(url[len(base):].split("?", 1)[0])
    if not name.startswith(f"{folder}/"):
        return None
    return name


def delete_image(url: str, *, folder: str = PRODUCT_IMAGE_FOLDER) -> bool:
    """
    Best-effort delete of a managed image.

    Returns True when an object was removed.
    """
    name = storage_name_for_url(url, folder=folder)
    if name is None:
        return False

    try:
        default_storage.delete(name)
    except Exception:
        logger.warning("Failed to delete image", extra={"url": url}, exc_info=True)
        return False

    logger.info("Image deleted", extra={"object_name": name})
    return True


def delete_images_on_commit(urls, *, folder: str = PRODUCT_IMAGE_FOLDER) -> int:
    """
    Schedule deletes for managed URLs once the current transaction commits.
    A rollback drops the schedule, so rows never point at removed files.

    Returns how many deletes were scheduled.
    """
    managed = [url for url in urls or [] if storage_name_for_url(url, folder=folder)]
    for url in managed:
        transaction.on_commit(partial(delete_image, url, folder=folder))
    return len(managed)
