"""Cart aggregate: one per user, keyed by the owner's email.

Items hold a snapshot of the product taken from the catalog when the item was
added, so totals are computed from the snapshot cost. No two items may refer
to the same product.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.cart.events import (
    CartCheckedOut,
    CartCreated,
    CartItemAdded,
    CartItemQuantityUpdated,
    CartItemRemoved,
)
from storefront.config import settings
from storefront.domain import storefront
from storefront.errors import Conflict, InvalidInput


@storefront.value_object(part_of="Cart")
class ProductSnapshot:
    """The catalog fields of a product as they were when it was put in the cart."""

    product_id: Identifier(required=True)
    name: String(required=True, max_length=200)
    category: String(max_length=100)
    cost: Float(required=True, min_value=0.0)
    rating: Integer(min_value=0, max_value=5)
    image: String(max_length=2048)

    @classmethod
    def of(cls, product):
        return cls(
            product_id=str(product.id),
            name=product.name,
            category=product.category,
            cost=product.cost,
            rating=product.rating,
            image=product.image,
        )


@storefront.entity(part_of="Cart")
class CartItem:
    product: ValueObject(ProductSnapshot, required=True)
    quantity: Integer(required=True)

    @property
    def subtotal(self):
        return self.product.cost * self.quantity


@storefront.aggregate
class Cart:
    email: String(required=True, max_length=254, unique=True)
    items: HasMany(CartItem)
    payment_option: String(max_length=50, default=settings.default_payment_option)

    @invariant.post
    def products_are_unique_in_cart(self):
        product_ids = [str(item.product.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    @classmethod
    def create(cls, email):
        cart = cls(email=email, payment_option=settings.default_payment_option)
        cart.raise_(
            CartCreated(
                cart_id=str(cart.id),
                email=email,
                payment_option=cart.payment_option,
            )
        )
        return cart

    def find_item(self, product_id):
        """Return the item holding `product_id`, or None."""
        return next(
            (item for item in self.items if str(item.product.product_id) == str(product_id)),
            None,
        )

    def has_product(self, product_id) -> bool:
        return self.find_item(product_id) is not None

    def ensure_product_not_in_cart(self, product_id):
        if self.has_product(product_id):
            raise Conflict("Product already in cart. Use the cart sidebar to update or remove product from cart")

    def add_product(self, product, quantity):
        """Append a new item for `product`. Existing items are never topped up."""
        self.ensure_product_not_in_cart(product.id)

        self.add_items(CartItem(product=ProductSnapshot.of(product), quantity=quantity))
        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                product_id=str(product.id),
                quantity=quantity,
            )
        )

    def update_product_quantity(self, product_id, quantity):
        item = self.find_item(product_id)
        if item is None:
            raise InvalidInput("Product not in cart")

        previous_quantity = item.quantity
        item.quantity = quantity
        self.raise_(
            CartItemQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def remove_product(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            raise InvalidInput("Product not in cart")

        self.remove_items(item)
        self.raise_(CartItemRemoved(cart_id=str(self.id), product_id=str(product_id)))

    def total(self):
        return sum(item.subtotal for item in self.items)

    def checkout(self):
        """Clear all items once they have been paid for. The cart itself stays."""
        total = self.total()
        items_count = len(self.items)

        for item in list(self.items):
            self.remove_items(item)
        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                email=self.email,
                total=total,
                items_count=items_count,
            )
        )
        return total
