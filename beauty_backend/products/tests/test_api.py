# products/tests/test_api.py

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from products.models import Product
from products.tests.utils import TempMediaMixin, make_product, png

User = get_user_model()


class ProductPermissionTests(TestCase):
    """
    GUARANTEES:
    - Anonymous users cannot reach the inventory
    - Non-admin accounts are forbidden
    - Categories are readable by anyone
    """

    def setUp(self):
        self.client = APIClient()

    def test_anonymous_is_rejected(self):
        res = self.client.get(reverse("products:products-list"))
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_customer_is_forbidden(self):
        customer = User.objects.create_user(email="c@aynbeauty.test", password="pw123456")
        self.client.force_authenticate(user=customer)

        res = self.client.get(reverse("products:products-list"))
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_categories_are_public(self):
        res = self.client.get(reverse("products:categories"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertIn({"name": "Bath & Body", "slug": "bath-body"}, res.json())


class ProductApiTests(TempMediaMixin, TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(
            email="admin@aynbeauty.test", password="admin@123", role="admin"
        )
        self.client.force_authenticate(user=self.admin)

    def test_create_multipart_with_images(self):
        res = self.client.post(
            reverse("products:products-list"),
            {
                "name": "Gel Shine Nail Polish",
                "description": "Chip-resistant nail colour.",
                "category": "Nails",
                "price_amount": "249.00",
                "quantity": "22",
                "images": [png("one.png"), png("two.png")],
            },
            format="multipart",
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertEqual(res.data["price"], 24900)
        self.assertEqual(res.data["price_display"], "₹249.00")
        self.assertEqual(len(res.data["images"]), 2)
        self.assertEqual(res.data["hint"], "gel shine nail polish product")

    def test_create_validation_errors(self):
        res = self.client.post(
            reverse("products:products-list"),
            {
                "name": "X",
                "description": "short",
                "category": "Hair",
                "price_amount": "0",
                "quantity": -1,
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        for field in ("description", "category", "price_amount", "quantity"):
            self.assertIn(field, res.data)
        self.assertFalse(Product.objects.exists())

    def test_price_and_stock_caps(self):
        res = self.client.post(
            reverse("products:products-list"),
            {
                "name": "Gold Leaf Cream",
                "description": "Luxury night cream with gold leaf.",
                "category": "Skincare",
                "price_amount": "30000000.00",
                "quantity": 5_000_000,
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("price_amount", res.data)
        self.assertIn("quantity", res.data)
        self.assertFalse(Product.objects.exists())

    def test_price_at_cap_is_accepted(self):
        res = self.client.post(
            reverse("products:products-list"),
            {
                "name": "Gold Leaf Cream",
                "description": "Luxury night cream with gold leaf.",
                "category": "Skincare",
                "price_amount": "10000000.00",
                "quantity": 1,
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertEqual(res.data["price"], 1_000_000_000)

    def test_list_supports_filters(self):
        make_product(name="Lipstick", category="Lips", quantity=0)
        make_product(name="Serum", category="Skincare", quantity=3)

        res = self.client.get(reverse("products:products-list"), {"category": "Lips"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["results"][0]["name"], "Lipstick")

        res = self.client.get(reverse("products:products-list"), {"stock": "low"})
        self.assertEqual([p["name"] for p in res.data["results"]], ["Serum"])

    def test_partial_update(self):
        product = make_product(name="Kajal", category="Eyes", price=19900, quantity=10)

        res = self.client.patch(
            reverse("products:products-detail", args=[product.id]),
            {"price_amount": "210.50", "quantity": 0},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)
        product.refresh_from_db()
        self.assertEqual(product.price, 21050)
        self.assertEqual(product.quantity, 0)
        self.assertTrue(res.data["is_out_of_stock"])

    def test_partial_update_does_not_reset_best_seller(self):
        product = make_product(name="Kajal", is_best_seller=True)

        self.client.patch(
            reverse("products:products-detail", args=[product.id]),
            {"quantity": 4},
            format="json",
        )

        product.refresh_from_db()
        self.assertTrue(product.is_best_seller)

    def test_edit_replaces_images(self):
        created = self.client.post(
            reverse("products:products-list"),
            {
                "name": "Body Butter",
                "description": "Whipped lavender body butter.",
                "category": "Bath & Body",
                "price_amount": "549",
                "quantity": "15",
                "images": [png("a.png")],
            },
            format="multipart",
        )
        old = created.data["images"][0]

        res = self.client.patch(
            reverse("products:products-detail", args=[created.data["id"]]),
            {"keep_images": [""], "images": [png("b.png")]},
            format="multipart",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)
        self.assertEqual(len(res.data["images"]), 1)
        self.assertNotEqual(res.data["images"][0], old)
        self.assertTrue(res.data["images"][0].endswith("-b.png"))

    def test_best_seller_action(self):
        product = make_product(name="Mascara")

        res = self.client.post(
            reverse("products:products-best-seller", args=[product.id]),
            {"is_best_seller": True},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertTrue(res.data["is_best_seller"])

    def test_delete(self):
        product = make_product(name="Soap")

        res = self.client.delete(reverse("products:products-detail", args=[product.id]))

        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Product.objects.filter(pk=product.pk).exists())

    def test_dashboard(self):
        make_product(name="A", quantity=0)

        res = self.client.get(reverse("products:dashboard"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["out_of_stock"], 1)
        self.assertEqual(len(res.data["chart"]), 7)
