"""Storefront: users, a product catalog and shopping carts with wallet checkout."""
