"""Shared fixtures for storefront tests: registered users and catalog products."""

import pytest
from protean import current_domain
from storefront.product.catalog import AddProduct
from storefront.user.registration import RegisterUser
from storefront.user.user import User


@pytest.fixture()
def register_user():
    """Register a user, optionally overriding wallet balance and address."""

    def _register(
        email="jane.doe@example.com",
        password="secret123",
        name="Jane Doe",
        wallet_money=None,
        address=None,
    ):
        user_id = current_domain.process(
            RegisterUser(name=name, email=email, password=password),
            asynchronous=False,
        )
        if wallet_money is not None or address is not None:
            repo = current_domain.repository_for(User)
            user = repo.get(user_id)
            if wallet_money is not None:
                user.wallet_money = wallet_money
            if address is not None:
                user.set_address(address)
            repo.add(user)
        return user_id

    return _register


@pytest.fixture()
def add_product():
    def _add(name="Running Shoes", cost=100.0, category="Fashion", rating=4):
        return current_domain.process(
            AddProduct(name=name, category=category, cost=cost, rating=rating),
            asynchronous=False,
        )

    return _add


@pytest.fixture()
def load_user():
    def _load(user_id):
        return current_domain.repository_for(User).get(user_id)

    return _load
