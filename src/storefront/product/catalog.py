"""Product catalog: listing command, handler and lookups."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product


@storefront.command(part_of="Product")
class AddProduct:
    """List a new product in the catalog."""

    name: String(required=True, max_length=200)
    category: String(required=True, max_length=100)
    cost: Float(required=True, min_value=0.0)
    rating: Integer(min_value=0, max_value=5)
    image: String(max_length=2048)


@storefront.command_handler(part_of=Product)
class ManageCatalogHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            name=command.name,
            category=command.category,
            cost=command.cost,
            rating=command.rating or 0,
            image=command.image,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)


def get_product_by_id(product_id) -> Product | None:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        return None


def get_products() -> list[Product]:
    """Every listed product; the query is unpaginated."""
    return current_domain.repository_for(Product)._dao.query.limit(None).all().items
