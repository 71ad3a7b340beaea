# cart/tests/test_cart_api.py

import uuid

from django.core.cache import cache
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from products.tests.utils import make_product


class CartApiTests(TestCase):
    """
    Guest cart over HTTP (no auth).
    """

    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.product = make_product(name="Volume Boost Mascara", price=49900, quantity=4)

        res = self.client.post(reverse("cart:create"), format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.cart_id = res.data["id"]

    def _add(self, quantity=1, product=None):
        return self.client.post(
            reverse("cart:items", args=[self.cart_id]),
            {"product_id": str((product or self.product).id), "quantity": quantity},
            format="json",
        )

    def test_add_and_read_cart(self):
        res = self._add(2)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["detail"], "Volume Boost Mascara (x2) has been added to your cart.")
        self.assertEqual(res.data["cart"]["item_count"], 2)
        self.assertEqual(res.data["cart"]["subtotal"], 99800)
        self.assertEqual(res.data["cart"]["total_display"], "₹998.00")
        self.assertEqual(res.data["cart"]["shipping"], "Free")

        badge = self.client.get(reverse("cart:count", args=[self.cart_id]))
        self.assertEqual(badge.data["item_count"], 2)

    def test_stock_error_envelope(self):
        res = self._add(10)

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "insufficient_stock")
        self.assertEqual(res.data["error"]["message"], "Only 4 items available.")

    def test_unknown_product(self):
        res = self.client.post(
            reverse("cart:items", args=[self.cart_id]),
            {"product_id": str(uuid.uuid4())},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["code"], "product_not_found")

    def test_unknown_cart(self):
        res = self.client.get(reverse("cart:detail", args=[uuid.uuid4()]))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_change_quantity_clamps(self):
        self._add(2)

        res = self.client.patch(
            reverse("cart:item-detail", args=[self.cart_id, self.product.id]),
            {"amount": 5},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["detail"], "Only 4 items available.")
        self.assertEqual(res.data["cart"]["items"][0]["quantity"], 4)

    def test_remove_and_clear(self):
        other = make_product(name="Nail Polish", quantity=3)
        self._add(1)
        self._add(1, product=other)

        res = self.client.delete(reverse("cart:item-detail", args=[self.cart_id, self.product.id]))
        self.assertEqual(res.data["detail"], "The item has been removed from your cart.")
        self.assertEqual(res.data["cart"]["item_count"], 1)

        res = self.client.delete(reverse("cart:detail", args=[self.cart_id]))
        self.assertEqual(res.data["cart"]["items"], [])
