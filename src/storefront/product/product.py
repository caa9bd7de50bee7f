"""Product aggregate: the catalog entries shoppers put in their carts."""

from protean.fields import Float, Integer, String

from storefront.domain import storefront
from storefront.product.events import ProductAdded


@storefront.aggregate
class Product:
    name: String(required=True, max_length=200)
    category: String(required=True, max_length=100)
    cost: Float(required=True, min_value=0.0)
    rating: Integer(default=0, min_value=0, max_value=5)
    image: String(max_length=2048)

    @classmethod
    def add(cls, name, category, cost, rating=0, image=None):
        product = cls(name=name, category=category, cost=cost, rating=rating, image=image)
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                category=category,
                cost=cost,
            )
        )
        return product
