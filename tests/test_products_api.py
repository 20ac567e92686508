# tests/test_products_api.py
from fastapi.testclient import TestClient

from storefront.database import Catalog, SEED_PRODUCTS
from storefront.main import app, create_app
from storefront.models import Product

client = TestClient(app)

def test_list_products_returns_seed_in_order():
    r = client.get("/api/products")
    assert r.status_code == 200
    body = r.json()
    assert [p["id"] for p in body] == [row["id"] for row in SEED_PRODUCTS]
    assert body[0]["name"] == SEED_PRODUCTS[0]["name"]

def test_list_products_by_category():
    r = client.get("/api/products", params={"category": "Rings"})
    assert r.status_code == 200
    body = r.json()
    assert body
    assert all(p["category"] == "Rings" for p in body)
    expected = [row["id"] for row in SEED_PRODUCTS if row["category"] == "Rings"]
    assert [p["id"] for p in body] == expected

def test_unknown_category_is_empty_not_error():
    r = client.get("/api/products", params={"category": "rings"})
    assert r.status_code == 200
    assert r.json() == []

def test_get_product():
    r = client.get("/api/products/2")
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == 2
    assert body["stock"] == 2

def test_stock_is_in_list_and_detail_alike():
    listed = {p["id"]: p for p in client.get("/api/products").json()}
    detail = client.get("/api/products/1").json()
    assert listed[1] == detail

def test_get_missing_product_is_404():
    r = client.get("/api/products/999")
    assert r.status_code == 404
    assert r.json() == {"error": "Product not found"}

def test_non_numeric_id_is_404():
    r = client.get("/api/products/abc")
    assert r.status_code == 404
    assert r.json() == {"error": "Product not found"}

def test_non_canonical_ids_are_404():
    for path in ("0_2", "+2", "02", "%EF%BC%92", "%20%202", "2%20"):
        r = client.get(f"/api/products/{path}")
        assert r.status_code == 404, path
        assert r.json() == {"error": "Product not found"}
    assert client.get("/api/products/2").status_code == 200

def test_categories():
    r = client.get("/api/categories")
    assert r.status_code == 200
    assert r.json() == ["Necklaces", "Rings", "Earrings", "Bracelets"]

def test_scenario_catalog():
    rows = [
        {"id": 1, "name": "A", "price": 100, "image": "a.jpg", "category": "Necklaces"},
        {"id": 2, "name": "B", "price": 200, "image": "b.jpg", "category": "Rings"},
        {"id": 3, "name": "C", "price": 300, "image": "c.jpg", "category": "Necklaces"},
    ]
    c = TestClient(create_app(Catalog.from_seed(rows)))
    assert c.get("/api/categories").json() == ["Necklaces", "Rings"]
    assert [p["id"] for p in c.get("/api/products?category=Necklaces").json()] == [1, 3]
    product = c.get("/api/products/2").json()
    assert product == rows[1]

def test_optional_fields_left_out():
    c = TestClient(create_app(Catalog([Product(id=1, name="A", price=0, image="a.jpg", category="Rings")])))
    body = c.get("/api/products/1").json()
    assert "stock" not in body
    assert "description" not in body

def test_empty_catalog():
    c = TestClient(create_app(Catalog()))
    assert c.get("/api/products").json() == []
    assert c.get("/api/categories").json() == []
    assert c.get("/api/products/1").status_code == 404

class BrokenCatalog(Catalog):
    def list_products(self, category=None):
        raise RuntimeError("disk on fire")

    def list_categories(self):
        raise RuntimeError("disk on fire")

def test_listing_failure_has_fixed_body():
    c = TestClient(create_app(BrokenCatalog()))
    r = c.get("/api/products")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch products"}
    r = c.get("/api/categories")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch categories"}

def test_health():
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "products": len(SEED_PRODUCTS)}
