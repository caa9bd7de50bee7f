"""User aggregate: credentials, wallet balance and shipping address."""

from datetime import datetime

import bcrypt
from protean.fields import DateTime, Float, String

from storefront.config import settings
from storefront.domain import storefront
from storefront.errors import InvalidInput
from storefront.user.email import EmailAddress, normalize_email
from storefront.user.events import AddressChanged, UserRegistered, WalletDebited


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


@storefront.aggregate
class User:
    """A registered shopper.

    Email is unique across users and stored normalized. The password is only
    ever held as a bcrypt hash. The wallet starts with the configured default
    credit and changes only at checkout; the address starts as the "not set"
    placeholder and must be replaced before the user can check out.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password: String(required=True, max_length=255)
    wallet_money: Float(default=settings.default_wallet_money, min_value=0.0)
    address: String(max_length=500, default=settings.default_address)
    registered_at: DateTime(default=datetime.now)

    @classmethod
    def register(cls, name, email, password):
        email = normalize_email(email)
        EmailAddress(address=email)

        now = datetime.now()
        user = cls(
            name=name,
            email=email,
            password=hash_password(password),
            wallet_money=settings.default_wallet_money,
            address=settings.default_address,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                name=name,
                email=email,
                wallet_money=user.wallet_money,
                registered_at=now,
            )
        )
        return user

    def is_password_match(self, password: str) -> bool:
        return bcrypt.checkpw(password.encode("utf-8"), self.password.encode("utf-8"))

    def has_set_non_default_address(self) -> bool:
        return self.address != settings.default_address

    def set_address(self, new_address):
        self.address = new_address
        self.raise_(AddressChanged(user_id=self.id, address=new_address))
        return self.address

    def debit_wallet(self, amount):
        """Take `amount` out of the wallet; the balance never goes negative."""
        if amount > self.wallet_money:
            raise InvalidInput("User has insufficient money to process")

        self.wallet_money -= amount
        self.raise_(
            WalletDebited(
                user_id=self.id,
                amount=amount,
                balance=self.wallet_money,
            )
        )
