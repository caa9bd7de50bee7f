"""Storefront load test scenarios.

Two stateful SequentialTaskSet journeys: a full purchase and cart churn
without checkout. Steps execute in order; each depends on the previous
step succeeding. Products are seeded once per Locust user in `on_start`.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, constant_pacing, task

from loadtests.data_generators import cart_item, product_data, registration_data, shipping_address
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CatalogState, ShopperState

_SEED_PRODUCTS = 5


class _ShopperJourney(SequentialTaskSet):
    def on_start(self):
        self.state = ShopperState()

    def _register(self):
        with self.client.post(
            "/auth/register",
            json=registration_data(),
            catch_response=True,
            name="POST /auth/register",
        ) as resp:
            if resp.status_code == 201:
                self.state.user_id = resp.json()["user_id"]
            else:
                resp.failure(f"Registration failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    def _add_to_cart(self, product_id):
        with self.client.post(
            f"/users/{self.state.user_id}/cart",
            json=cart_item(product_id),
            catch_response=True,
            name="POST /users/{id}/cart",
        ) as resp:
            if resp.status_code == 201:
                self.state.cart_product_ids.append(product_id)
            else:
                resp.failure(f"Add to cart failed: {resp.status_code}: {extract_error_detail(resp)}")

    def _pick_products(self, count):
        return random.sample(self.user.catalog.product_ids, k=min(count, len(self.user.catalog.product_ids)))


class PurchaseJourney(_ShopperJourney):
    """Register -> Set Address -> Browse -> Add 2 Products -> Change Quantity -> Checkout."""

    @task
    def register(self):
        self._register()

    @task
    def set_address(self):
        with self.client.put(
            f"/users/{self.state.user_id}",
            json={"address": shipping_address()},
            catch_response=True,
            name="PUT /users/{id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.address_set = True
            else:
                resp.failure(f"Set address failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def browse(self):
        self.client.get("/products", name="GET /products")

    @task
    def fill_cart(self):
        for product_id in self._pick_products(2):
            self._add_to_cart(product_id)

    @task
    def change_quantity(self):
        if not self.state.cart_product_ids:
            return
        with self.client.put(
            f"/users/{self.state.user_id}/cart",
            json=cart_item(self.state.cart_product_ids[0], quantity=2),
            catch_response=True,
            name="PUT /users/{id}/cart",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update cart failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def checkout(self):
        with self.client.put(
            f"/users/{self.state.user_id}/cart/checkout",
            catch_response=True,
            name="PUT /users/{id}/cart/checkout",
        ) as resp:
            if resp.status_code == 204:
                self.state.checkouts += 1
                self.state.cart_product_ids.clear()
            else:
                resp.failure(f"Checkout failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class CartChurnJourney(_ShopperJourney):
    """Register -> Add 3 Products -> Remove One -> Zero Another -> View Cart.

    Exercises both removal routes: DELETE by product and PUT with quantity 0.
    """

    @task
    def register(self):
        self._register()

    @task
    def fill_cart(self):
        for product_id in self._pick_products(3):
            self._add_to_cart(product_id)

    @task
    def remove_product(self):
        if not self.state.cart_product_ids:
            return
        product_id = self.state.cart_product_ids.pop()
        with self.client.delete(
            f"/users/{self.state.user_id}/cart/{product_id}",
            catch_response=True,
            name="DELETE /users/{id}/cart/{product_id}",
        ) as resp:
            if resp.status_code != 204:
                resp.failure(f"Remove from cart failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def zero_quantity(self):
        if not self.state.cart_product_ids:
            return
        product_id = self.state.cart_product_ids.pop()
        with self.client.put(
            f"/users/{self.state.user_id}/cart",
            json=cart_item(product_id, quantity=0),
            catch_response=True,
            name="PUT /users/{id}/cart (quantity 0)",
        ) as resp:
            if resp.status_code != 204:
                resp.failure(f"Zero quantity failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def view_cart(self):
        self.client.get(f"/users/{self.state.user_id}/cart", name="GET /users/{id}/cart")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    """Locust user simulating storefront shoppers.

    Weighted task distribution:
    - 60% Purchase Journey
    - 40% Cart Churn
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        PurchaseJourney: 3,
        CartChurnJourney: 2,
    }

    def on_start(self):
        self.catalog = CatalogState()
        for _ in range(_SEED_PRODUCTS):
            resp = self.client.post("/products", json=product_data(), name="POST /products")
            if resp.status_code == 201:
                self.catalog.product_ids.append(resp.json()["product_id"])


class RegistrationSpikeUser(HttpUser):
    """Spike test: rapid-fire registration.

    Spawn 50-100 of these at once to see how email uniqueness checks
    hold up under a sudden burst.
    """

    wait_time = constant_pacing(0.05)

    @task
    def rapid_registration(self):
        with self.client.post(
            "/auth/register",
            json=registration_data(),
            catch_response=True,
            name="POST /auth/register [spike]",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Spike registration failed: {resp.status_code}: {extract_error_detail(resp)}")
