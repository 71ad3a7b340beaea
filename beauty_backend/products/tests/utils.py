# products/tests/utils.py

import shutil
import tempfile

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings

from products.models import Product

PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\nIDATx\x9cc\x00\x01"
    b"\x00\x00\x05\x00\x01\r\n-\xb4\x00\x00\x00\x00IEND\xaeB`\x82"
)


def png(name="photo.png"):
    return SimpleUploadedFile(name, PNG_BYTES, content_type="image/png")


def make_product(**overrides) -> Product:
    data = {
        "name": "Hydrating Rose Serum",
        "description": "Lightweight serum with rose water.",
        "category": "Skincare",
        "price": 129900,
        "quantity": 10,
    }
    data.update(overrides)
    return Product.objects.create(**data)


class TempMediaMixin:
    """Routes default_storage into a throwaway MEDIA_ROOT for the test class."""

    @classmethod
    def setUpClass(cls):
        cls._media_root = tempfile.mkdtemp(prefix="beauty-media-")
        cls._media_override = override_settings(MEDIA_ROOT=cls._media_root, MEDIA_URL="/media/")
        cls._media_override.enable()
        super().setUpClass()

    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        cls._media_override.disable()
        shutil.rmtree(cls._media_root, ignore_errors=True)
