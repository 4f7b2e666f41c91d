# tests/test_products_api.py
from conftest import new_product

def test_root_welcome(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.text.startswith("Welcome to the Product API!")

def test_list_defaults(client):
    r = client.get("/api/products")
    assert r.status_code == 200
    body = r.json()
    assert body["page"] == 1
    assert body["limit"] == 10
    assert body["total"] == 3
    assert [p["id"] for p in body["products"]] == ["1", "2", "3"]

def test_list_filter_by_category_keeps_order(client):
    client.post("/api/products", json=new_product(name="Toaster"))
    r = client.get("/api/products", params={"category": "kitchen"})
    body = r.json()
    assert body["total"] == 2
    assert [p["name"] for p in body["products"]] == ["Coffee Maker", "Toaster"]
    assert all(p["category"] == "kitchen" for p in body["products"])

def test_list_filter_is_case_sensitive(client):
    r = client.get("/api/products", params={"category": "Kitchen"})
    assert r.json()["total"] == 0
    assert r.json()["products"] == []

def test_pagination_second_page(client):
    r = client.get("/api/products", params={"page": 2, "limit": 1})
    body = r.json()
    assert body == {
        "page": 2,
        "limit": 1,
        "total": 3,
        "products": [client.get("/api/products/2").json()],
    }

def test_pagination_applies_after_filter(client):
    r = client.get("/api/products", params={"category": "electronics", "page": 2, "limit": 1})
    body = r.json()
    assert body["total"] == 2
    assert [p["name"] for p in body["products"]] == ["Smartphone"]

def test_pagination_past_the_end_is_empty(client):
    r = client.get("/api/products", params={"page": 5, "limit": 2})
    assert r.status_code == 200
    assert r.json()["products"] == []
    assert r.json()["total"] == 3

def test_pagination_rejects_bad_values(client):
    for params in ({"page": 0}, {"limit": -1}, {"page": "abc"}, {"limit": "2.5"}):
        r = client.get("/api/products", params=params)
        assert r.status_code == 400, params
        assert "must be a positive integer" in r.json()["error"]

def test_get_by_id(client):
    r = client.get("/api/products/1")
    assert r.status_code == 200
    assert r.json() == {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    }

def test_get_missing_is_404(client):
    r = client.get("/api/products/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Product not found"}

def test_search_case_insensitive(client):
    r = client.get("/api/products/search", params={"q": "lap"})
    assert r.status_code == 200
    assert [p["name"] for p in r.json()] == ["Laptop"]
    r = client.get("/api/products/search", params={"q": "MAKER"})
    assert [p["name"] for p in r.json()] == ["Coffee Maker"]

def test_search_no_match_is_empty_list(client):
    r = client.get("/api/products/search", params={"q": "zzz"})
    assert r.status_code == 200
    assert r.json() == []

def test_search_requires_q(client):
    for params in ({}, {"q": ""}):
        r = client.get("/api/products/search", params=params)
        assert r.status_code == 400
        assert r.text == 'Query parameter "q" is required'

def test_stats(client):
    r = client.get("/api/products/stats")
    assert r.status_code == 200
    assert r.json() == {"electronics": 2, "kitchen": 1}

def test_stats_follows_mutations(client):
    client.post("/api/products", json=new_product(category="garden"))
    client.delete("/api/products/3")
    assert client.get("/api/products/stats").json() == {"electronics": 2, "garden": 1}

def test_create_then_get(client, store):
    r = client.post("/api/products", json=new_product(inStock=True))
    assert r.status_code == 201
    created = r.json()
    assert created["id"] not in {"1", "2", "3"}
    assert client.get(f"/api/products/{created['id']}").json() == created
    assert len(store) == 4

def test_create_ids_are_unique(client):
    ids = {client.post("/api/products", json=new_product()).json()["id"] for _ in range(20)}
    assert len(ids) == 20

def test_create_ignores_client_id(client):
    r = client.post("/api/products", json=new_product(id="1"))
    assert r.status_code == 201
    assert r.json()["id"] != "1"
    assert client.get("/api/products/1").json()["name"] == "Laptop"

def test_create_keeps_extra_fields(client):
    r = client.post("/api/products", json=new_product(sku="K-17"))
    assert r.json()["sku"] == "K-17"
    assert "inStock" not in r.json()

def test_create_missing_name_does_not_mutate(client, store):
    body = new_product()
    del body["name"]
    r = client.post("/api/products", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid product data"}
    assert len(store) == 3

def test_create_rejects_bad_fields(client, store):
    bad = [
        new_product(name=""),
        new_product(description=""),
        new_product(category=""),
        new_product(price="35"),
        new_product(price=True),
        new_product(price=None),
    ]
    for body in bad:
        r = client.post("/api/products", json=body)
        assert r.status_code == 400, body
    assert client.post("/api/products", json=[new_product()]).status_code == 400
    assert client.post("/api/products").status_code == 400
    assert len(store) == 3

def test_create_accepts_float_and_negative_price(client):
    assert client.post("/api/products", json=new_product(price=9.99)).status_code == 201
    assert client.post("/api/products", json=new_product(price=-5)).status_code == 201

def test_update_merges(client):
    r = client.put("/api/products/1", json=new_product(name="Laptop Pro", price=1500, category="electronics"))
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == "1"
    assert body["name"] == "Laptop Pro"
    assert body["price"] == 1500
    # not in the body, kept from the stored record
    assert body["inStock"] is True
    assert client.get("/api/products/1").json() == body

def test_update_keeps_position(client):
    client.put("/api/products/2", json=new_product(category="electronics"))
    ids = [p["id"] for p in client.get("/api/products").json()["products"]]
    assert ids == ["1", "2", "3"]

def test_update_missing_is_404(client):
    r = client.put("/api/products/nope", json=new_product())
    assert r.status_code == 404

def test_update_requires_full_product(client):
    r = client.put("/api/products/1", json={"price": 10})
    assert r.status_code == 400
    assert client.get("/api/products/1").json()["price"] == 1200

def test_delete(client, store):
    r = client.delete("/api/products/2")
    assert r.status_code == 204
    assert r.content == b""
    assert client.get("/api/products/2").status_code == 404
    assert [p["id"] for p in client.get("/api/products").json()["products"]] == ["1", "3"]
    assert len(store) == 2

def test_delete_missing_is_404(client):
    assert client.delete("/api/products/nope").status_code == 404
