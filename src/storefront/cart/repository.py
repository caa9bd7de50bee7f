"""Repository for the Cart aggregate."""

from storefront.cart.cart import Cart
from storefront.domain import storefront


@storefront.repository(part_of=Cart)
class CartRepository:
    def find_by_email(self, email: str) -> Cart | None:
        """Carts are keyed by their owner's email; there is at most one per email."""
        carts = self._dao.query.filter(email=email).all().items
        return carts[0] if carts else None
