"""Checkout: pay for the cart from the user's wallet and empty it.

The wallet debit and the cart clearing are saved one after the other, debit
first. They are not wrapped in a cross-aggregate transaction: if the cart
save fails after the user save, the user has been charged and the items are
still in the cart. There is no compensation step for that window.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import storefront
from storefront.errors import InvalidInput, NotFound
from storefront.user.user import User

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class Checkout:
    user_id: Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class CheckoutHandler:
    @handle(Checkout)
    def checkout(self, command):
        users = current_domain.repository_for(User)
        carts = current_domain.repository_for(Cart)

        user = users.get(command.user_id)
        cart = carts.find_by_email(user.email)
        if cart is None:
            raise NotFound("User does not have a cart")

        if not cart.items:
            raise InvalidInput("Cart is empty")

        if not user.has_set_non_default_address():
            raise InvalidInput("Address not set")

        total = cart.total()
        if total > user.wallet_money:
            logger.info(
                "Checkout rejected for insufficient funds",
                user_id=str(user.id),
                total=total,
                wallet_money=user.wallet_money,
            )
            raise InvalidInput("User has insufficient money to process")

        user.debit_wallet(total)
        users.add(user)

        cart.checkout()
        carts.add(cart)

        logger.info("Checkout completed", user_id=str(user.id), cart_id=str(cart.id), total=total)
        return total
