"""FastAPI routes for the Storefront: auth, users, products and carts.

Each route translates between Pydantic schemas (external contract) and
Protean commands (internal domain concepts).
"""

from fastapi import APIRouter, Response
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    AddProductRequest,
    AddressResponse,
    AddToCartRequest,
    CartResponse,
    LoginRequest,
    ProductIdResponse,
    ProductResponse,
    RegisterRequest,
    SetAddressRequest,
    UpdateCartRequest,
    UserIdResponse,
    UserResponse,
)
from storefront.cart.checkout import Checkout
from storefront.cart.items import DeleteProductFromCart, UpdateProductInCart, add_product_to_cart
from storefront.cart.queries import get_cart_by_user
from storefront.errors import NotFound
from storefront.product.catalog import AddProduct, get_product_by_id, get_products
from storefront.user.address import SetAddress
from storefront.user.authentication import login_user_with_email_and_password
from storefront.user.queries import get_user_address_by_id, get_user_by_id
from storefront.user.registration import RegisterUser


def _load_user(user_id: str):
    user = get_user_by_id(user_id)
    if user is None:
        raise NotFound("User not found")
    return user


# ---------------------------------------------------------------------------
# Auth Router
# ---------------------------------------------------------------------------
auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register", status_code=201, response_model=UserIdResponse)
async def register(body: RegisterRequest) -> UserIdResponse:
    command = RegisterUser(
        name=body.name,
        email=body.email,
        password=body.password,
    )
    user_id = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=user_id)


@auth_router.post("/login", response_model=UserResponse)
async def login(body: LoginRequest) -> UserResponse:
    user = login_user_with_email_and_password(body.email, body.password)
    return UserResponse.from_user(user)


# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.get("/{user_id}")
async def get_user(user_id: str, q: str | None = None):
    """Fetch a user, or only their address with `?q=address`."""
    if q == "address":
        details = get_user_address_by_id(user_id)
        if details is None:
            raise NotFound("User not found")
        return AddressResponse(address=details["address"])
    return UserResponse.from_user(_load_user(user_id))


@user_router.put("/{user_id}", response_model=AddressResponse)
async def set_address(user_id: str, body: SetAddressRequest) -> AddressResponse:
    _load_user(user_id)
    address = current_domain.process(
        SetAddress(user_id=user_id, address=body.address),
        asynchronous=False,
    )
    return AddressResponse(address=address)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    return [ProductResponse.from_product(product) for product in get_products()]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = get_product_by_id(product_id)
    if product is None:
        raise NotFound("Product not found")
    return ProductResponse.from_product(product)


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(
        name=body.name,
        category=body.category,
        cost=body.cost,
        rating=body.rating,
        image=body.image,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=product_id)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/users/{user_id}/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def get_cart(user_id: str) -> CartResponse:
    return CartResponse.from_cart(get_cart_by_user(_load_user(user_id)))


@cart_router.post("", status_code=201, response_model=CartResponse)
async def add_to_cart(user_id: str, body: AddToCartRequest) -> CartResponse:
    _load_user(user_id)
    cart = add_product_to_cart(user_id, body.product_id, body.quantity)
    return CartResponse.from_cart(cart)


@cart_router.put("", response_model=CartResponse)
async def update_product_in_cart(user_id: str, body: UpdateCartRequest):
    """Set a product's quantity; a quantity of 0 removes it from the cart."""
    _load_user(user_id)
    if body.quantity == 0:
        current_domain.process(
            DeleteProductFromCart(user_id=user_id, product_id=body.product_id),
            asynchronous=False,
        )
        return Response(status_code=204)

    command = UpdateProductInCart(
        user_id=user_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    cart = current_domain.process(command, asynchronous=False)
    return CartResponse.from_cart(cart)


@cart_router.delete("/{product_id}", status_code=204)
async def delete_product_from_cart(user_id: str, product_id: str) -> Response:
    _load_user(user_id)
    current_domain.process(
        DeleteProductFromCart(user_id=user_id, product_id=product_id),
        asynchronous=False,
    )
    return Response(status_code=204)


@cart_router.put("/checkout", status_code=204)
async def checkout(user_id: str) -> Response:
    _load_user(user_id)
    current_domain.process(Checkout(user_id=user_id), asynchronous=False)
    return Response(status_code=204)
