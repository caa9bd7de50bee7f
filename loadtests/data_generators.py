"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's Pydantic request
schemas: emails that survive normalization, passwords with at least one
letter and one number, and addresses of at least 20 characters.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["Fashion", "Electronics", "Home & Kitchen", "Sports", "Books"]

# ---------- Users ----------


def valid_email() -> str:
    """Generate unique emails; a uuid fragment keeps registrations from colliding."""
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:4]}@{domain}"


def valid_password() -> str:
    """Generate passwords of 8+ characters mixing letters and digits."""
    return f"{fake.word()}{random.randint(1000, 9999)}"


def registration_data() -> dict:
    """Generate RegisterRequest payload matching schema field names."""
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "password": valid_password(),
    }


def shipping_address() -> str:
    """Generate a single-line address; always well over the 20-character minimum."""
    return f"{fake.street_address()}, {fake.city()}, {fake.state_abbr()} {fake.zipcode()}"


# ---------- Catalog ----------


def product_data() -> dict:
    """Generate AddProductRequest payload.

    Costs stay between 5 and 60 so that a cart of a few items fits the
    default wallet credit of 500.
    """
    word = fake.word().capitalize()
    return {
        "name": f"{word} {random.choice(['Shoes', 'Lamp', 'Backpack', 'Bottle', 'Novel'])}",
        "category": random.choice(CATEGORIES),
        "cost": round(random.uniform(5.0, 60.0), 2),
        "rating": random.randint(0, 5),
        "image": f"https://cdn.example.com/{uuid.uuid4().hex[:12]}.png",
    }


# ---------- Cart ----------


def cart_item(product_id: str, quantity: int | None = None) -> dict:
    """Generate AddToCartRequest / UpdateCartRequest payload."""
    return {
        "productId": product_id,
        "quantity": quantity if quantity is not None else random.randint(1, 2),
    }
