"""Process-wide storefront settings, read once from the environment."""

import os
from dataclasses import dataclass


def _get_env(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


@dataclass(frozen=True)
class Settings:
    default_wallet_money: float
    default_payment_option: str
    default_address: str
    bcrypt_rounds: int


settings = Settings(
    default_wallet_money=float(_get_env("DEFAULT_WALLET_MONEY", "500")),
    default_payment_option=_get_env("DEFAULT_PAYMENT_OPTION", "PAYMENT_OPTION_DEFAULT"),
    default_address=_get_env("DEFAULT_ADDRESS", "ADDRESS_NOT_SET"),
    bcrypt_rounds=int(_get_env("BCRYPT_ROUNDS", "12")),
)
