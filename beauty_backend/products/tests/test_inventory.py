# products/tests/test_inventory.py

import os
from unittest import mock

from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.db import transaction
from django.test import TestCase

from products.services.exceptions import InvalidImageError
from products.models import Product
from products.services.images import delete_images_on_commit, placeholder_image_url, storage_name_for_url
from products.services.inventory import (
    create_product,
    delete_product,
    set_best_seller,
    update_product,
)
from products.tests.utils import TempMediaMixin, png


class CreateProductTests(TempMediaMixin, TestCase):
    """
    GUARANTEES:
    - Validation failures never create a product
    - Uploaded images are stored under products/ in order
    - No images -> placeholder
    - hint + modified_at are derived on create
    """

    def _create(self, **overrides):
        data = {
            "name": "Velvet Matte Lipstick",
            "description": "Long-wear matte lipstick in a creamy formula.",
            "category": "Lips",
            "price": 59900,
            "quantity": 12,
        }
        data.update(overrides)
        return create_product(**data)

    def test_create_with_uploaded_images(self):
        product = self._create(image_files=[png("front.png"), png("back.png")])

        self.assertEqual(len(product.images), 2)
        self.assertTrue(product.images[0].endswith("-front.png"))
        self.assertTrue(product.images[1].endswith("-back.png"))
        for url in product.images:
            name = storage_name_for_url(url)
            self.assertIsNotNone(name)
            self.assertTrue(default_storage.exists(name))

    def test_create_without_images_uses_placeholder(self):
        product = self._create()

        self.assertEqual(product.images, [placeholder_image_url("Velvet Matte Lipstick")])
        self.assertIn("placehold.co/400x400.png?text=Velvet%20Matte%20Lipstick", product.images[0])

    def test_create_with_image_url(self):
        product = self._create(image_url="https://cdn.example.com/lipstick.png")
        self.assertEqual(product.images, ["https://cdn.example.com/lipstick.png"])

    def test_hint_and_modified_at(self):
        product = self._create()

        self.assertEqual(product.hint, "velvet matte lipstick product")
        self.assertIsNotNone(product.modified_at)

    def test_short_description_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            self._create(description="too short")

        self.assertIn("description", ctx.exception.message_dict)

    def test_non_positive_price_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            self._create(price=0)
        self.assertIn("price", ctx.exception.message_dict)

    def test_negative_quantity_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            self._create(quantity=-1)
        self.assertIn("quantity", ctx.exception.message_dict)

    def test_quantity_above_cap_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            self._create(quantity=5_000_000)
        self.assertIn("quantity", ctx.exception.message_dict)

    def test_unknown_category_rejected(self):
        with self.assertRaises(ValidationError):
            self._create(category="Hair")

    def test_non_image_upload_rejected(self):
        from django.core.files.uploadedfile import SimpleUploadedFile

        bad = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
        with self.assertRaises(InvalidImageError):
            self._create(image_files=[bad])


class UpdateProductTests(TempMediaMixin, TestCase):
    """
    Image reconciliation on edit.

    GUARANTEES:
    - keep_images=None and no files -> images untouched
    - dropped managed images are deleted from storage
    - kept images keep their order, new uploads are appended
    - removing everything falls back to a placeholder
    """

    def setUp(self):
        self.product = create_product(
            name="Silk Finish Foundation",
            description="Buildable medium coverage foundation.",
            category="Face",
            price=149900,
            quantity=8,
            image_files=[png("a.png"), png("b.png")],
        )
        self.first, self.second = self.product.images

    def _exists(self, url):
        return default_storage.exists(storage_name_for_url(url))

    def test_field_changes_leave_images_alone(self):
        product = update_product(self.product, changes={"quantity": 0, "name": "Silk Foundation"})

        self.assertEqual(product.images, [self.first, self.second])
        self.assertEqual(product.quantity, 0)
        self.assertEqual(product.hint, "silk foundation product")

    def test_dropped_image_is_deleted(self):
        with self.captureOnCommitCallbacks(execute=True):
            product = update_product(self.product, keep_images=[self.second])

        self.assertEqual(product.images, [self.second])
        self.assertFalse(self._exists(self.first))
        self.assertTrue(self._exists(self.second))

    def test_new_uploads_are_appended_after_kept(self):
        product = update_product(
            self.product, keep_images=[self.second, self.first], new_files=[png("c.png")]
        )

        self.assertEqual(product.images[:2], [self.first, self.second])
        self.assertTrue(product.images[2].endswith("-c.png"))

    def test_new_files_without_keep_list_keep_everything(self):
        product = update_product(self.product, new_files=[png("c.png")])
        self.assertEqual(len(product.images), 3)

    def test_removing_all_images_uses_placeholder(self):
        with self.captureOnCommitCallbacks(execute=True):
            product = update_product(self.product, keep_images=[])

        self.assertEqual(product.images, [placeholder_image_url("Silk Finish Foundation")])
        self.assertFalse(self._exists(self.first))
        self.assertFalse(self._exists(self.second))

    def test_unmanaged_urls_are_never_deleted(self):
        self.product.images = ["https://cdn.example.com/x.png"]
        self.product.save()

        product = update_product(self.product, keep_images=[])
        self.assertEqual(len(product.images), 1)

    def test_rolled_back_update_keeps_dropped_images(self):
        with self.assertRaises(RuntimeError):
            with transaction.atomic():
                update_product(self.product, keep_images=[self.second])
                raise RuntimeError("abort")

        self.product.refresh_from_db()
        self.assertEqual(self.product.images, [self.first, self.second])
        self.assertTrue(self._exists(self.first))

    def test_failed_storage_delete_is_logged_and_update_kept(self):
        with mock.patch(
            "django.core.files.storage.FileSystemStorage.delete",
            side_effect=OSError("disk busy"),
        ):
            with self.assertLogs("products.services.images", level="WARNING") as logs:
                with self.captureOnCommitCallbacks(execute=True):
                    product = update_product(self.product, keep_images=[self.second])

        self.assertIn("Failed to delete image", logs.output[0])
        product.refresh_from_db()
        self.assertEqual(product.images, [self.second])
        self.assertTrue(self._exists(self.first))

    def test_price_above_cap_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            update_product(self.product, changes={"price": 3_000_000_000})
        self.assertIn("price", ctx.exception.message_dict)

    def test_invalid_change_does_not_save(self):
        with self.assertRaises(ValidationError):
            update_product(self.product, changes={"price": -5})

        self.product.refresh_from_db()
        self.assertEqual(self.product.price, 149900)

    def test_modified_at_advances(self):
        before = self.product.modified_at
        product = update_product(self.product, changes={"quantity": 3})
        self.assertGreaterEqual(product.modified_at, before)


class DeleteAndToggleTests(TempMediaMixin, TestCase):
    def test_delete_removes_managed_images(self):
        product = create_product(
            name="Oud Noir",
            description="Warm oud and amber fragrance.",
            category="Fragrances",
            price=249900,
            quantity=5,
            image_files=[png("oud.png")],
        )
        name = storage_name_for_url(product.images[0])
        self.assertTrue(os.path.exists(default_storage.path(name)))

        with self.captureOnCommitCallbacks(execute=True):
            delete_product(product)

        self.assertFalse(default_storage.exists(name))

    def test_set_best_seller(self):
        product = create_product(
            name="Kohl Kajal",
            description="Intense black kajal pencil.",
            category="Eyes",
            price=19900,
            quantity=60,
        )

        set_best_seller(product, True)
        product.refresh_from_db()
        self.assertTrue(product.is_best_seller)

        set_best_seller(product, False)
        product.refresh_from_db()
        self.assertFalse(product.is_best_seller)

    def test_rolled_back_delete_keeps_row_and_images(self):
        product = create_product(
            name="Rose Bath Salts",
            description="Himalayan salts with rose petals.",
            category="Bath & Body",
            price=39900,
            quantity=7,
            image_files=[png("salts.png")],
        )
        product_id = product.pk
        name = storage_name_for_url(product.images[0])

        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            with self.assertRaises(RuntimeError):
                with transaction.atomic():
                    delete_product(product)
                    raise RuntimeError("abort")

        self.assertEqual(callbacks, [])
        self.assertTrue(Product.objects.filter(pk=product_id).exists())
        self.assertTrue(default_storage.exists(name))

    def test_only_managed_urls_are_scheduled(self):
        product = create_product(
            name="Nail Glaze",
            description="Glossy top coat for nails.",
            category="Nails",
            price=14900,
            quantity=3,
            image_files=[png("glaze.png")],
        )
        managed = product.images[0]
        urls = [managed, placeholder_image_url("Nail Glaze"), "https://cdn.example.com/x.png"]

        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            scheduled = delete_images_on_commit(urls)

        self.assertEqual(scheduled, 1)
        self.assertEqual(len(callbacks), 1)
        self.assertFalse(default_storage.exists(storage_name_for_url(managed)))
