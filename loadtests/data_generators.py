"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's request validation
(username and password lengths, six-digit pincodes, positive prices) and
use the public JSON field names.
"""

import random
import uuid

from faker import Faker

fake = Faker()

STATES = ["Karnataka", "Maharashtra", "Tamil Nadu", "Delhi", "West Bengal", "Gujarat"]

# ---------- Auth ----------


def unique_username() -> str:
    """Usernames are unique per run: 'lt_<hex>'."""
    return f"lt_{uuid.uuid4().hex[:10]}"


def valid_email(username: str) -> str:
    return f"{username}@{fake.free_email_domain()}"


def register_data(role: str = "user") -> dict:
    username = unique_username()
    return {
        "username": username,
        "email": valid_email(username),
        "password": "loadtest-secret",
        "fullName": {"firstName": fake.first_name()[:100], "lastName": fake.last_name()[:100]},
        "role": role,
    }


def address_data() -> dict:
    return {
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": random.choice(STATES),
        "country": "India",
        "pincode": f"{random.randint(110000, 855999)}",
    }


# ---------- Catalogue ----------


def product_form() -> dict:
    """Multipart form fields for POST /api/products."""
    return {
        "title": fake.catch_phrase()[:200],
        "description": fake.paragraph(nb_sentences=3),
        "priceAmount": f"{random.randint(99, 9999)}",
        "priceCurrency": "INR",
        "stock": f"{random.randint(50, 500)}",
    }


def search_term() -> str:
    return random.choice(["saree", "lamp", "kurta", "tea", "brass", "silk", "cotton"])
