"""Cart item management: commands and handler.

The cart is looked up by the user's email on every operation. Adding goes
through `add_product_to_cart`, which opens the cart in its own unit of work
before the product is added, so a cart opened on a failed first add stays
open. Updating and deleting require the cart to exist already.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import storefront
from storefront.errors import InternalError, InvalidInput
from storefront.product.catalog import get_product_by_id
from storefront.user.user import User

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class OpenCart:
    """Open an empty cart for the user unless they already have one."""

    user_id: Identifier(required=True)


@storefront.command(part_of="Cart")
class AddProductToCart:
    """Add a product to the user's open cart."""

    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class UpdateProductInCart:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)


@storefront.command(part_of="Cart")
class DeleteProductFromCart:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


def add_product_to_cart(user_id, product_id, quantity):
    """Open the user's cart if needed, then add `quantity` of the product to it.

    Opening and adding are processed as two commands, so the opened cart is
    persisted even when the add is rejected.
    """
    current_domain.process(OpenCart(user_id=user_id), asynchronous=False)
    return current_domain.process(
        AddProductToCart(user_id=user_id, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(OpenCart)
    def open_cart(self, command):
        user = current_domain.repository_for(User).get(command.user_id)
        repo = current_domain.repository_for(Cart)

        cart = repo.find_by_email(user.email)
        if cart is not None:
            return cart

        try:
            cart = Cart.create(email=user.email)
            repo.add(cart)
        except ValidationError as exc:
            logger.error("Cart creation failed", email=user.email, error=str(exc))
            raise InternalError("User cart creation failed because user already have a cart") from exc

        logger.info("Cart created", cart_id=str(cart.id), email=user.email)
        return cart

    @handle(AddProductToCart)
    def add_product_to_cart(self, command):
        user = current_domain.repository_for(User).get(command.user_id)
        repo = current_domain.repository_for(Cart)

        cart = repo.find_by_email(user.email)
        if cart is None:
            raise InvalidInput("User does not have a cart")

        cart.ensure_product_not_in_cart(command.product_id)

        product = get_product_by_id(command.product_id)
        if product is None:
            raise InvalidInput("Product doesn't exist in database")

        cart.add_product(product, command.quantity)
        repo.add(cart)
        logger.info(
            "Product added to cart",
            cart_id=str(cart.id),
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return cart

    @handle(UpdateProductInCart)
    def update_product_in_cart(self, command):
        user = current_domain.repository_for(User).get(command.user_id)
        repo = current_domain.repository_for(Cart)

        cart = repo.find_by_email(user.email)
        if cart is None:
            raise InvalidInput("User does not have a cart. Use POST to create cart and add a product")

        if get_product_by_id(command.product_id) is None:
            raise InvalidInput("Product doesn't exist in database")

        cart.update_product_quantity(command.product_id, command.quantity)
        repo.add(cart)
        logger.info(
            "Cart quantity updated",
            cart_id=str(cart.id),
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return cart

    @handle(DeleteProductFromCart)
    def delete_product_from_cart(self, command):
        user = current_domain.repository_for(User).get(command.user_id)
        repo = current_domain.repository_for(Cart)

        cart = repo.find_by_email(user.email)
        if cart is None:
            raise InvalidInput("User does not have a cart")

        cart.remove_product(command.product_id)
        repo.add(cart)
        logger.info("Product removed from cart", cart_id=str(cart.id), product_id=str(command.product_id))
