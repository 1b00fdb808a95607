"""
Shared fixtures: an in-memory MongoDB per test and ready-made session tokens.
"""
import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from storefront.config.database import get_database
from storefront.main import app
from storefront.security import generate_token

SHIPPING_INFO = {
    "firstName": "Ana",
    "lastName": "Silva",
    "email": "ana.silva@gmail.com",
    "phone": "+351 912 345 678",
    "address": "Rua Augusta 10",
    "city": "Lisboa",
    "state": "Lisboa",
    "zipCode": "1100-053",
    "country": "Portugal",
}


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def db():
    mongo = AsyncMongoMockClient()
    return mongo[f"storefront_test_{ObjectId()}"]


@pytest.fixture
def client(db):
    async def override_get_database():
        return db

    app.dependency_overrides[get_database] = override_get_database
    # No context manager: the lifespan would try to reach a real MongoDB.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def shopper():
    return {
        "userId": str(ObjectId()),
        "email": "ana.silva@gmail.com",
        "name": "Ana Silva",
        "isAdmin": False,
    }


@pytest.fixture
def shopper_headers(shopper):
    return bearer(generate_token(shopper))


@pytest.fixture
def other_shopper_headers():
    return bearer(generate_token({
        "userId": str(ObjectId()),
        "email": "rui.costa@gmail.com",
        "name": "Rui Costa",
        "isAdmin": False,
    }))


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/admin/login", json={"username": "admin1", "password": "admin1"})
    assert response.status_code == 200
    return bearer(response.json()["data"]["token"])


@pytest.fixture
def create_product(client, admin_headers):
    def _create(**overrides):
        payload = {
            "name": "Linen Shirt",
            "description": "Breathable linen shirt",
            "price": 39.9,
            "image": "https://cdn.example.com/linen-shirt.jpg",
            "stock": 10,
            "category": "apparel",
        }
        payload.update(overrides)
        response = client.post("/api/products", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


@pytest.fixture
def place_order(client):
    def _place(headers, *lines):
        items = [
            {
                "productId": product["_id"],
                "name": product["name"],
                "price": product["price"],
                "quantity": quantity,
                "image": product.get("image"),
            }
            for product, quantity in lines
        ]
        total = sum(product["price"] * quantity for product, quantity in lines)
        return client.post(
            "/api/orders",
            json={"items": items, "shippingInfo": SHIPPING_INFO, "totalAmount": total},
            headers=headers,
        )

    return _place
