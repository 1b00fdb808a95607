import asyncio

from bson import ObjectId


def test_create_product_defaults(client, admin_headers):
    response = client.post(
        "/api/products",
        json={
            "name": "Ceramic Mug",
            "description": "Hand glazed, 350ml",
            "price": 12.5,
            "image": "https://cdn.example.com/mug.jpg",
            "stock": 0,
        },
        headers=admin_headers,
    )
    assert response.status_code == 201
    product = response.json()["data"]
    assert ObjectId.is_valid(product["_id"])
    assert product["category"] == "general"
    assert product["active"] is True
    assert product["stock"] == 0
    assert product["createdAt"]


def test_create_product_requires_admin(client, shopper_headers):
    payload = {"name": "Mug", "description": "Mug", "price": 1, "image": "x", "stock": 1}
    assert client.post("/api/products", json=payload).status_code == 401
    assert client.post("/api/products", json=payload, headers=shopper_headers).status_code == 403


def test_create_product_validation(client, admin_headers):
    response = client.post(
        "/api/products",
        json={"name": "Mug", "description": "Mug", "price": 0, "stock": 1},
        headers=admin_headers,
    )
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert {d["field"] for d in body["details"]} == {"price", "image"}


def test_get_product(client, create_product):
    product = create_product()
    response = client.get(f"/api/products/{product['_id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": product}


def test_get_product_bad_and_missing_ids(client):
    response = client.get("/api/products/not-an-id")
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid product ID"

    response = client.get(f"/api/products/{ObjectId()}")
    assert response.status_code == 404
    assert response.json()["error"] == "Product not found"


def test_list_products_filters(client, create_product):
    create_product(name="Linen Shirt", price=40, stock=3, category="Apparel")
    create_product(name="Wool Shirt", price=80, stock=0, category="apparel")
    create_product(name="Straw Hat", price=15, stock=7, category="accessories")

    names = lambda response: sorted(p["name"] for p in response.json()["data"])

    response = client.get("/api/products")
    assert response.status_code == 200
    assert names(response) == ["Linen Shirt", "Straw Hat", "Wool Shirt"]
    assert response.json()["pagination"] == {"total": 3, "limit": 20, "offset": 0, "hasMore": False}

    assert names(client.get("/api/products", params={"name": "shirt"})) == ["Linen Shirt", "Wool Shirt"]
    assert names(client.get("/api/products", params={"category": "APPAREL"})) == ["Linen Shirt", "Wool Shirt"]
    assert names(client.get("/api/products", params={"minPrice": 20, "maxPrice": 50})) == ["Linen Shirt"]
    assert names(client.get("/api/products", params={"inStock": "true"})) == ["Linen Shirt", "Straw Hat"]
    assert names(client.get("/api/products", params={"inStock": "false"})) == ["Wool Shirt"]

    page = client.get("/api/products", params={"limit": 2, "offset": 0}).json()
    assert len(page["data"]) == 2
    assert page["pagination"]["hasMore"] is True


def test_oversold_product_counts_as_out_of_stock(client, db, create_product):
    mug = create_product(name="Ceramic Mug", stock=1)
    asyncio.run(db.products.update_one({"_id": ObjectId(mug["_id"])}, {"$set": {"stock": -2}}))

    response = client.get("/api/products", params={"inStock": "false"})
    assert [p["name"] for p in response.json()["data"]] == ["Ceramic Mug"]
    assert client.get("/api/products", params={"inStock": "true"}).json()["data"] == []


def test_update_product_partial(client, admin_headers, create_product):
    product = create_product()
    response = client.put(
        f"/api/products/{product['_id']}",
        json={"price": 29.9, "stock": 4},
        headers=admin_headers,
    )
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["price"] == 29.9
    assert updated["stock"] == 4
    assert updated["name"] == product["name"]
    assert updated["updatedAt"]


def test_update_missing_product(client, admin_headers):
    response = client.put(f"/api/products/{ObjectId()}", json={"price": 1}, headers=admin_headers)
    assert response.status_code == 404


def test_delete_is_soft(client, admin_headers, create_product):
    product = create_product()

    response = client.delete(f"/api/products/{product['_id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Product deleted successfully"}

    assert client.get(f"/api/products/{product['_id']}").status_code == 404
    assert client.get("/api/products").json()["data"] == []

    everything = client.get("/api/products/admin/all", headers=admin_headers).json()["data"]
    assert len(everything) == 1
    assert everything[0]["active"] is False
    assert everything[0]["deletedAt"]


def test_reactivating_clears_deleted_at(client, admin_headers, create_product):
    product = create_product()
    client.delete(f"/api/products/{product['_id']}", headers=admin_headers)

    response = client.put(f"/api/products/{product['_id']}", json={"active": True}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["data"]["active"] is True
    assert response.json()["data"]["deletedAt"] is None
    assert client.get(f"/api/products/{product['_id']}").status_code == 200


def test_delete_missing_product(client, admin_headers):
    assert client.delete(f"/api/products/{ObjectId()}", headers=admin_headers).status_code == 404
    assert client.delete("/api/products/zzz", headers=admin_headers).status_code == 400


def test_admin_listing_requires_admin(client, shopper_headers):
    assert client.get("/api/products/admin/all", headers=shopper_headers).status_code == 403
