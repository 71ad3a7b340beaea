# cart/tests/test_cart_service.py

from django.test import TestCase

from cart.services import (
    add_to_cart,
    change_quantity,
    clear_cart,
    create_cart,
    item_count,
    remove_item,
    subtotal,
)
from cart.services.exceptions import (
    CartInactiveError,
    CartItemNotFoundError,
    InsufficientStockError,
    OutOfStockError,
)
from cart.signals import cart_changed
from products.tests.utils import make_product


class AddToCartTests(TestCase):
    """
    GUARANTEES:
    - out-of-stock products are rejected
    - quantity never exceeds stock (existing + requested)
    - lines snapshot the product
    """

    def setUp(self):
        self.cart = create_cart()
        self.product = make_product(name="Velvet Matte Lipstick", price=59900, quantity=5)

    def test_add_new_line(self):
        result = add_to_cart(self.cart, self.product, 2)

        self.assertEqual(result.message, "Velvet Matte Lipstick (x2) has been added to your cart.")
        self.assertEqual(result.item.name, "Velvet Matte Lipstick")
        self.assertEqual(result.item.price, 59900)
        self.assertEqual(result.item.stock, 5)
        self.assertEqual(item_count(self.cart), 2)

    def test_add_existing_line_accumulates(self):
        add_to_cart(self.cart, self.product, 2)
        result = add_to_cart(self.cart, self.product, 1)

        self.assertEqual(result.item.quantity, 3)
        self.assertEqual(self.cart.items.count(), 1)

    def test_existing_line_over_stock(self):
        add_to_cart(self.cart, self.product, 4)

        with self.assertRaises(InsufficientStockError) as ctx:
            add_to_cart(self.cart, self.product, 2)

        self.assertEqual(ctx.exception.message, "Only 1 more items available.")
        self.assertEqual(item_count(self.cart), 4)

    def test_new_line_over_stock(self):
        with self.assertRaises(InsufficientStockError) as ctx:
            add_to_cart(self.cart, self.product, 6)

        self.assertEqual(ctx.exception.message, "Only 5 items available.")
        self.assertFalse(self.cart.items.exists())

    def test_out_of_stock_rejected(self):
        empty = make_product(name="Tinted Lip Balm", quantity=0)

        with self.assertRaises(OutOfStockError):
            add_to_cart(self.cart, empty, 1)

    def test_inactive_cart_rejected(self):
        self.cart.is_active = False
        self.cart.save()

        with self.assertRaises(CartInactiveError):
            add_to_cart(self.cart, self.product, 1)


class ChangeQuantityTests(TestCase):
    def setUp(self):
        self.cart = create_cart()
        self.product = make_product(name="Kohl Kajal", price=19900, quantity=3)
        add_to_cart(self.cart, self.product, 2)

    def test_increment(self):
        result = change_quantity(self.cart, self.product.id, 1)

        self.assertEqual(result.item.quantity, 3)
        self.assertFalse(result.clamped)

    def test_decrement_below_one_is_ignored(self):
        change_quantity(self.cart, self.product.id, -1)
        result = change_quantity(self.cart, self.product.id, -1)

        self.assertEqual(result.item.quantity, 1)

    def test_clamps_to_stock(self):
        result = change_quantity(self.cart, self.product.id, 5)

        self.assertTrue(result.clamped)
        self.assertEqual(result.item.quantity, 3)
        self.assertEqual(result.message, "Only 3 items available.")

    def test_stock_is_refreshed_from_product(self):
        self.product.quantity = 10
        self.product.save()

        result = change_quantity(self.cart, self.product.id, 5)

        self.assertEqual(result.item.stock, 10)
        self.assertEqual(result.item.quantity, 7)

    def test_deleted_product_keeps_snapshot(self):
        line = self.cart.items.get()
        self.product.delete()

        result = change_quantity(self.cart, line.id, 1)

        self.assertEqual(result.item.quantity, 3)
        self.assertEqual(result.item.name, "Kohl Kajal")

    def test_unknown_line(self):
        other = make_product(name="Other")
        with self.assertRaises(CartItemNotFoundError):
            change_quantity(self.cart, other.id, 1)


class RemoveAndClearTests(TestCase):
    def setUp(self):
        self.cart = create_cart()
        self.a = make_product(name="A", price=10000, quantity=5)
        self.b = make_product(name="B", price=2500, quantity=5)
        add_to_cart(self.cart, self.a, 2)
        add_to_cart(self.cart, self.b, 3)

    def test_subtotal(self):
        self.assertEqual(subtotal(self.cart), 2 * 10000 + 3 * 2500)

    def test_remove_item(self):
        message = remove_item(self.cart, self.a.id)

        self.assertEqual(message, "The item has been removed from your cart.")
        self.assertEqual(item_count(self.cart), 3)

    def test_clear(self):
        clear_cart(self.cart)
        self.assertEqual(item_count(self.cart), 0)


class CartSignalTests(TestCase):
    def test_each_mutation_emits_cart_changed(self):
        events = []

        def listener(sender, cart, action, item_count, **kwargs):
            events.append((action, item_count))

        cart_changed.connect(listener)
        self.addCleanup(cart_changed.disconnect, listener)

        cart = create_cart()
        product = make_product(name="Serum", quantity=5)

        add_to_cart(cart, product, 2)
        change_quantity(cart, product.id, 1)
        remove_item(cart, product.id)
        clear_cart(cart)

        self.assertEqual(
            events,
            [("add", 2), ("update", 3), ("remove", 0), ("clear", 0)],
        )
