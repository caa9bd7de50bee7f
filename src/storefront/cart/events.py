"""Domain events for the Cart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartCreated:
    """A cart was opened for a user on their first add."""

    __version__ = 1

    cart_id: Identifier(required=True)
    email: String(required=True)
    payment_option: String(required=True)


@storefront.event(part_of="Cart")
class CartItemAdded:
    __version__ = 1

    cart_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)


@storefront.event(part_of="Cart")
class CartItemQuantityUpdated:
    __version__ = 1

    cart_id: Identifier(required=True)
    product_id: Identifier(required=True)
    previous_quantity: Integer(required=True)
    new_quantity: Integer(required=True)


@storefront.event(part_of="Cart")
class CartItemRemoved:
    __version__ = 1

    cart_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.event(part_of="Cart")
class CartCheckedOut:
    """The cart's items were paid for and cleared."""

    __version__ = 1

    cart_id: Identifier(required=True)
    email: String(required=True)
    total: Float(required=True)
    items_count: Integer(required=True)
