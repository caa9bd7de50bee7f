"""Domain events for the User aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A new shopper account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    wallet_money: Float(required=True)
    registered_at: DateTime(required=True)


@storefront.event(part_of="User")
class AddressChanged:
    """A user's shipping address was overwritten."""

    __version__ = 1

    user_id: Identifier(required=True)
    address: String(required=True)


@storefront.event(part_of="User")
class WalletDebited:
    """Money was taken from a user's wallet to pay for a checkout."""

    __version__ = 1

    user_id: Identifier(required=True)
    amount: Float(required=True)
    balance: Float(required=True)
