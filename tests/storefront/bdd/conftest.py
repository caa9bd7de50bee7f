"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then
from storefront.cart.cart import Cart
from storefront.cart.items import DeleteProductFromCart, add_product_to_cart
from storefront.user.address import SetAddress


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def catalog():
    """Product ids by name."""
    return {}


@pytest.fixture()
def error():
    """Container for the captured storefront error."""
    return {"exc": None}


def _cart_of(user):
    return current_domain.repository_for(Cart).find_by_email(user.email)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" costing {cost:d}'))
def product_in_catalog(catalog, add_product, name, cost):
    catalog[name] = add_product(name=name, cost=float(cost))


@given(parsers.cfparse("a shopper with {amount:d} in their wallet"), target_fixture="shopper_id")
def shopper_with_wallet(register_user, amount):
    return register_user(wallet_money=float(amount))


@given("the shopper has set their address")
def shopper_has_address(shopper_id):
    current_domain.process(
        SetAddress(user_id=shopper_id, address="221B Baker Street, London NW1 6XE"),
        asynchronous=False,
    )


@given(parsers.cfparse('the shopper has {quantity:d} "{name}" in their cart'))
def shopper_has_product_in_cart(shopper_id, catalog, quantity, name):
    add_product_to_cart(shopper_id, catalog[name], quantity)


@given(parsers.cfparse('the shopper has removed "{name}" from their cart'))
def shopper_has_removed_product(shopper_id, catalog, name):
    current_domain.process(
        DeleteProductFromCart(user_id=shopper_id, product_id=catalog[name]),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the shopper's cart has {count:d} items"))
def cart_has_items(shopper_id, load_user, count):
    assert len(_cart_of(load_user(shopper_id)).items) == count


@then("the shopper's cart is empty")
def cart_is_empty(shopper_id, load_user):
    cart = _cart_of(load_user(shopper_id))
    assert cart is not None
    assert len(cart.items) == 0


@then(parsers.cfparse('the cart holds {quantity:d} "{name}"'))
def cart_holds(shopper_id, load_user, catalog, quantity, name):
    item = _cart_of(load_user(shopper_id)).find_item(catalog[name])
    assert item is not None
    assert item.quantity == quantity
