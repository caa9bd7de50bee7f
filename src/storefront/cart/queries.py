"""Read-side lookups for carts."""

from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.errors import NotFound


def get_cart_by_user(user) -> Cart:
    cart = current_domain.repository_for(Cart).find_by_email(user.email)
    if cart is None:
        raise NotFound("User does not have a cart")
    return cart
