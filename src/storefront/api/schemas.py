"""Pydantic request/response schemas for the Storefront API."""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, EmailStr, Field, field_validator


def _normalize_email(value):
    return value.strip().lower() if isinstance(value, str) else value


def _check_password(value: str) -> str:
    value = value.strip()
    if len(value) < 8:
        raise ValueError("password must be at least 8 characters")
    if not re.search(r"\d", value) or not re.search(r"[a-zA-Z]", value):
        raise ValueError("password must contain at least 1 letter and 1 number")
    return value


Email = Annotated[EmailStr, BeforeValidator(_normalize_email)]
Password = Annotated[str, Field(max_length=128), AfterValidator(_check_password)]


# --- Request Schemas ---


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Jane Doe", "email": "jane.doe@example.com", "password": "secret123"}]
        }
    }

    name: str = Field(..., min_length=1, max_length=100)
    email: Email
    password: Password

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return value.strip()


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "jane.doe@example.com", "password": "secret123"}]}}

    email: Email
    password: Password


class SetAddressRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"address": "221B Baker Street, London NW1 6XE"}]}}

    address: str = Field(..., min_length=20, max_length=500)


class AddProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Running Shoes",
                    "category": "Fashion",
                    "cost": 100,
                    "rating": 4,
                    "image": "https://cdn.example.com/shoes.png",
                }
            ]
        }
    }

    name: str = Field(..., max_length=200)
    category: str = Field(..., max_length=100)
    cost: float = Field(..., ge=0)
    rating: int = Field(0, ge=0, le=5)
    image: str | None = Field(None, max_length=2048)


class AddToCartRequest(BaseModel):
    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {"examples": [{"productId": "a1b2c3d4", "quantity": 2}]},
    }

    product_id: str = Field(..., alias="productId")
    quantity: int = Field(..., ge=1)


class UpdateCartRequest(BaseModel):
    """A quantity of 0 removes the product from the cart."""

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {"examples": [{"productId": "a1b2c3d4", "quantity": 3}]},
    }

    product_id: str = Field(..., alias="productId")
    quantity: int = Field(..., ge=0)


# --- Response Schemas ---


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    wallet_money: float
    address: str

    @classmethod
    def from_user(cls, user) -> UserResponse:
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            wallet_money=user.wallet_money,
            address=user.address,
        )


class UserIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"}]}}

    user_id: str


class AddressResponse(BaseModel):
    address: str


class ProductResponse(BaseModel):
    id: str
    name: str
    category: str
    cost: float
    rating: int | None = None
    image: str | None = None

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            category=product.category,
            cost=product.cost,
            rating=product.rating,
            image=product.image,
        )


class CartItemResponse(BaseModel):
    product: ProductResponse
    quantity: int


class CartResponse(BaseModel):
    id: str
    email: str
    payment_option: str
    items: list[CartItemResponse]

    @classmethod
    def from_cart(cls, cart) -> CartResponse:
        return cls(
            id=str(cart.id),
            email=cart.email,
            payment_option=cart.payment_option,
            items=[
                CartItemResponse(
                    product=ProductResponse(
                        id=str(item.product.product_id),
                        name=item.product.name,
                        category=item.product.category,
                        cost=item.product.cost,
                        rating=item.product.rating,
                        image=item.product.image,
                    ),
                    quantity=item.quantity,
                )
                for item in cart.items
            ],
        )


class ProductIdResponse(BaseModel):
    product_id: str
