"""Storefront API package."""

from storefront.api.errors import register_error_handlers
from storefront.api.routes import auth_router, cart_router, product_router, user_router

__all__ = ["auth_router", "user_router", "product_router", "cart_router", "register_error_handlers"]
