# products/tests/test_products.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, TestCase

from products.categories import (
    BATH_BODY,
    CATEGORIES,
    category_slug,
    resolve_category,
    slug_to_category_name,
)
from products.models import Product
from products.pricing import format_money, to_major_units, to_minor_units


class ProductModelTests(TestCase):
    """
    Product model tests.

    GUARANTEES:
    - Products can be created safely
    - Out-of-stock is derived from quantity
    - clean() rejects non-positive prices and unknown categories
    """

    def _product(self, **overrides):
        data = {
            "name": "Velvet Matte Lipstick",
            "description": "Long-wear matte lipstick.",
            "category": "Lips",
            "price": 59900,
            "quantity": 4,
        }
        data.update(overrides)
        return Product.objects.create(**data)

    def test_product_creation(self):
        product = self._product()

        self.assertEqual(product.name, "Velvet Matte Lipstick")
        self.assertEqual(product.images, [])
        self.assertFalse(product.is_best_seller)
        self.assertIsNotNone(product.created_at)

    def test_out_of_stock_flag(self):
        self.assertFalse(self._product(quantity=1).is_out_of_stock)
        self.assertTrue(self._product(name="Empty", quantity=0).is_out_of_stock)

    def test_clean_rejects_zero_price(self):
        product = Product(name="Free", description="x" * 20, category="Lips", price=0)
        with self.assertRaises(ValidationError):
            product.clean()

    def test_clean_rejects_unknown_category(self):
        product = Product(name="Shampoo", description="x" * 20, category="Hair", price=100)
        with self.assertRaises(ValidationError):
            product.clean()

    def test_cover_image_is_first_image(self):
        product = self._product(images=["https://cdn.test/a.png", "https://cdn.test/b.png"])
        self.assertEqual(product.cover_image, "https://cdn.test/a.png")

    def test_short_description_truncates(self):
        product = self._product(description="a" * 150)
        self.assertEqual(product.short_description, "a" * 100 + "...")

    def test_product_string_representation(self):
        self.assertIn("Velvet Matte Lipstick", str(self._product()))


class CategoryTests(SimpleTestCase):
    def test_slug_to_name(self):
        self.assertEqual(slug_to_category_name("skincare"), "Skincare")
        self.assertEqual(slug_to_category_name("bath-body"), "Bath & Body")

    def test_name_to_slug(self):
        self.assertEqual(category_slug(BATH_BODY), "bath-body")
        self.assertEqual(category_slug("Fragrances"), "fragrances")

    def test_every_category_round_trips_through_its_slug(self):
        for name in CATEGORIES:
            self.assertEqual(resolve_category(category_slug(name)), name)

    def test_unknown_slug_resolves_to_none(self):
        self.assertIsNone(resolve_category("hair-care"))
        self.assertIsNone(resolve_category(""))


class PricingTests(SimpleTestCase):
    def test_minor_unit_conversion(self):
        self.assertEqual(to_minor_units("59.99"), 5999)
        self.assertEqual(to_minor_units(Decimal("0.005")), 1)
        self.assertEqual(to_major_units(5999), Decimal("59.99"))

    def test_invalid_amount(self):
        with self.assertRaises(ValueError):
            to_minor_units("abc")

    def test_inr_uses_indian_grouping(self):
        self.assertEqual(format_money(10000000), "₹1,00,000.00")
        self.assertEqual(format_money(12345678), "₹1,23,456.78")
        self.assertEqual(format_money(59900), "₹599.00")

    def test_other_currencies_use_thousands_grouping(self):
        self.assertEqual(format_money(10000000, "USD"), "$100,000.00")
