# tests/test_storeclient.py
import asyncio

import httpx
import requests
from fastapi.testclient import TestClient

from sdk.storeclient import StoreClient, format_price
from storefront.database import Catalog
from storefront.main import create_app

BASE = "http://testserver/api"

def live_client(app=None):
    app = app or create_app()
    return StoreClient(base_url=BASE, session=TestClient(app))

class DownSession:
    """Session whose every request fails at the transport level."""

    def get(self, url, **kwargs):
        raise requests.ConnectionError(f"cannot reach {url}")

    post = get

class FakeResponse:
    def __init__(self, status_code=200, body=None, text="not json"):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")

class CannedSession:
    def __init__(self, response):
        self.response = response

    def get(self, url, **kwargs):
        return self.response

    post = get

# ---------------------------
# Against the real app
# ---------------------------
def test_reads_against_app():
    c = live_client()
    products = c.list_products()
    assert [p["id"] for p in products][:3] == [1, 2, 3]
    assert [p["id"] for p in c.list_products("Necklaces")] == [1, 3]
    assert c.list_categories() == ["Necklaces", "Rings", "Earrings", "Bracelets"]
    assert c.get_product(2)["name"] == "Solitaire Diamond Ring"

def test_missing_product_is_none():
    c = live_client()
    assert c.get_product(999) is None
    assert c.get_product("abc") is None

def test_writes_return_server_body():
    c = live_client()
    assert c.subscribe("kavya@example.com")["success"] is True
    again = c.subscribe("kavya@example.com")
    assert again == {"success": False, "error": "Email already subscribed"}

    assert c.contact("Kavya", "kavya@example.com", "Hi")["success"] is True
    assert c.contact("", "kavya@example.com", "Hi")["error"] == "name is required"

    cart = c.add_to_cart(6, 1)
    assert cart["cart"]["total"] == 2799900
    assert c.add_to_cart(999)["error"] == "Product not found"

def test_server_error_degrades_to_empty():
    class BrokenCatalog(Catalog):
        def list_products(self, category=None):
            raise RuntimeError("boom")

        def list_categories(self):
            raise RuntimeError("boom")

    c = live_client(create_app(BrokenCatalog()))
    assert c.list_products() == []
    assert c.list_categories() == []

# ---------------------------
# Graceful degradation
# ---------------------------
def test_unreachable_backend_gives_empty_results():
    c = StoreClient(base_url=BASE, session=DownSession())
    assert c.list_products() == []
    assert c.list_products("Rings") == []
    assert c.list_categories() == []
    assert c.get_product(1) is None

def test_unreachable_backend_on_write():
    c = StoreClient(base_url=BASE, session=DownSession())
    resp = c.subscribe("a@example.com")
    assert resp["success"] is False
    assert resp["error"]

def test_malformed_json_gives_empty_results():
    c = StoreClient(base_url=BASE, session=CannedSession(FakeResponse(200, None)))
    assert c.list_products() == []
    assert c.list_categories() == []
    assert c.get_product(1) is None
    assert c.contact("a", "b", "c") == {"success": False, "error": "HTTP 200"}

def test_wrong_shape_gives_empty_results():
    c = StoreClient(base_url=BASE, session=CannedSession(FakeResponse(200, {"unexpected": True})))
    assert c.list_products() == []
    assert c.list_categories() == []
    c = StoreClient(base_url=BASE, session=CannedSession(FakeResponse(200, [1, 2])))
    assert c.get_product(1) is None

def test_base_url_trailing_slash():
    c = StoreClient(base_url="http://shop.example.com/api/", session=DownSession())
    assert c.base_url == "http://shop.example.com/api"

# ---------------------------
# Async
# ---------------------------
def test_async_listing():
    app = create_app()
    c = StoreClient(base_url=BASE)
    transport = httpx.ASGITransport(app=app)
    products = asyncio.run(c.list_products_async("Rings", transport=transport))
    assert [p["id"] for p in products] == [2, 6]

def test_async_listing_unreachable():
    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    c = StoreClient(base_url=BASE)
    products = asyncio.run(c.list_products_async(transport=httpx.MockTransport(refuse)))
    assert products == []

def test_format_price():
    assert format_price(4599900) == "₹45,999.00"
    assert format_price(0) == "₹0.00"

def test_empty_category_is_sent_not_dropped():
    c = live_client()
    assert c.list_products("") == []
    assert len(c.list_products()) == 6
    products = asyncio.run(StoreClient(base_url=BASE).list_products_async("", transport=httpx.ASGITransport(app=create_app())))
    assert products == []
