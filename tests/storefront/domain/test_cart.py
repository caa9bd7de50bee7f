"""Tests for Cart aggregate item management and checkout."""

import pytest
from storefront.cart.cart import Cart, ProductSnapshot
from storefront.cart.events import (
    CartCheckedOut,
    CartCreated,
    CartItemAdded,
    CartItemQuantityUpdated,
    CartItemRemoved,
)
from storefront.config import settings
from storefront.errors import Conflict, InvalidInput
from storefront.product.product import Product


def _make_cart():
    return Cart.create(email="jane.doe@example.com")


def _make_product(name="Running Shoes", cost=100.0, category="Fashion"):
    return Product.add(name=name, category=category, cost=cost, rating=4)


def _product_ids(cart):
    return [str(item.product.product_id) for item in cart.items]


class TestCreateCart:
    def test_new_cart_is_empty(self):
        cart = _make_cart()
        assert cart.email == "jane.doe@example.com"
        assert len(cart.items) == 0

    def test_new_cart_has_default_payment_option(self):
        assert _make_cart().payment_option == settings.default_payment_option

    def test_create_raises_event(self):
        cart = _make_cart()
        created = [e for e in cart._events if isinstance(e, CartCreated)]
        assert len(created) == 1
        assert created[0].email == "jane.doe@example.com"


class TestAddProduct:
    def test_add_product(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_product(product, 2)
        assert _product_ids(cart) == [str(product.id)]
        assert cart.items[0].quantity == 2

    def test_item_holds_product_snapshot(self):
        cart = _make_cart()
        product = _make_product(name="Backpack", cost=45.5, category="Bags")
        cart.add_product(product, 1)
        snapshot = cart.items[0].product
        assert isinstance(snapshot, ProductSnapshot)
        assert snapshot.name == "Backpack"
        assert snapshot.cost == 45.5
        assert snapshot.category == "Bags"

    def test_add_raises_event(self):
        cart = _make_cart()
        product = _make_product()
        cart._events.clear()
        cart.add_product(product, 3)
        assert len(cart._events) == 1
        event = cart._events[0]
        assert isinstance(event, CartItemAdded)
        assert event.product_id == str(product.id)
        assert event.quantity == 3

    def test_items_keep_insertion_order(self):
        cart = _make_cart()
        first, second = _make_product(name="A"), _make_product(name="B")
        cart.add_product(first, 1)
        cart.add_product(second, 1)
        assert _product_ids(cart) == [str(first.id), str(second.id)]

    def test_adding_same_product_again_conflicts(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_product(product, 2)

        with pytest.raises(Conflict) as exc:
            cart.add_product(product, 5)

        assert exc.value.message == (
            "Product already in cart. Use the cart sidebar to update or remove product from cart"
        )
        assert _product_ids(cart) == [str(product.id)]
        assert cart.items[0].quantity == 2


class TestUpdateProductQuantity:
    def test_update_quantity(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_product(product, 1)
        cart.update_product_quantity(product.id, 4)
        assert cart.items[0].quantity == 4

    def test_update_raises_event(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_product(product, 1)
        cart._events.clear()
        cart.update_product_quantity(product.id, 4)
        event = cart._events[0]
        assert isinstance(event, CartItemQuantityUpdated)
        assert event.previous_quantity == 1
        assert event.new_quantity == 4

    def test_update_product_not_in_cart(self):
        cart = _make_cart()
        cart.add_product(_make_product(name="A"), 1)
        with pytest.raises(InvalidInput) as exc:
            cart.update_product_quantity(_make_product(name="B").id, 2)
        assert exc.value.message == "Product not in cart"
        assert cart.items[0].quantity == 1


class TestRemoveProduct:
    def test_remove_exactly_one_item(self):
        cart = _make_cart()
        first, second = _make_product(name="A"), _make_product(name="B")
        cart.add_product(first, 1)
        cart.add_product(second, 1)

        cart.remove_product(first.id)

        assert _product_ids(cart) == [str(second.id)]

    def test_remove_raises_event(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_product(product, 1)
        cart._events.clear()
        cart.remove_product(product.id)
        assert isinstance(cart._events[0], CartItemRemoved)

    def test_removing_again_fails(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_product(product, 1)
        cart.remove_product(product.id)

        with pytest.raises(InvalidInput) as exc:
            cart.remove_product(product.id)
        assert exc.value.message == "Product not in cart"


class TestTotalAndCheckout:
    def test_total_is_sum_of_cost_times_quantity(self):
        cart = _make_cart()
        cart.add_product(_make_product(name="A", cost=100.0), 2)
        cart.add_product(_make_product(name="B", cost=50.0), 1)
        assert cart.total() == 250.0

    def test_total_of_fractional_costs(self):
        cart = _make_cart()
        cart.add_product(_make_product(name="A", cost=19.99), 3)
        cart.add_product(_make_product(name="B", cost=0.5), 7)
        assert cart.total() == 19.99 * 3 + 0.5 * 7

    def test_empty_cart_total(self):
        assert _make_cart().total() == 0

    def test_checkout_clears_items_and_keeps_cart(self):
        cart = _make_cart()
        cart.add_product(_make_product(name="A", cost=100.0), 2)
        cart.add_product(_make_product(name="B", cost=50.0), 1)

        total = cart.checkout()

        assert total == 250.0
        assert len(cart.items) == 0
        assert cart.email == "jane.doe@example.com"

    def test_checkout_raises_event(self):
        cart = _make_cart()
        cart.add_product(_make_product(cost=100.0), 2)
        cart._events.clear()
        cart.checkout()
        event = cart._events[0]
        assert isinstance(event, CartCheckedOut)
        assert event.total == 200.0
        assert event.items_count == 1
