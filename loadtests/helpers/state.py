"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared
across users. State tracks ids returned by creation endpoints so that
follow-up requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks a single simulated shopper from registration to checkout."""

    user_id: str | None = None
    address_set: bool = False
    cart_product_ids: list[str] = field(default_factory=list)
    checkouts: int = 0


@dataclass
class CatalogState:
    """Product ids seeded by a Locust user, shared by its task sets."""

    product_ids: list[str] = field(default_factory=list)
