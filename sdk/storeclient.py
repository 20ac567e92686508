# sdk/storeclient.py
import logging
import requests
import httpx
from typing import Any, Dict, List, Optional
from rich import print

from storefront.config import settings

logger = logging.getLogger(__name__)


class StoreClient:
    """Client for the storefront API.

    Read calls never raise: a network error, an error status or a body
    that isn't the expected JSON gives an empty result (``[]`` or
    ``None``) so a page can still render. Write calls return the
    server's JSON body, which carries ``success`` and ``error``.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, session=None):
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session = session if session is not None else requests.Session()

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        try:
            r = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
            if r.status_code == 404:
                return None
            r.raise_for_status()
            return r.json()
        except (requests.RequestException, httpx.HTTPError, ValueError) as e:
            logger.warning("GET %s failed: %s", path, e)
            return None

    def _post_json(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            r = self.session.post(f"{self.base_url}{path}", json=payload, timeout=self.timeout)
        except (requests.RequestException, httpx.HTTPError) as e:
            logger.warning("POST %s failed: %s", path, e)
            return {"success": False, "error": "Service unavailable"}
        try:
            body = r.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            logger.warning("POST %s returned HTTP %s without a JSON object", path, r.status_code)
            return {"success": False, "error": f"HTTP {r.status_code}"}
        return body

    # Products
    def list_products(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"category": category} if category is not None else None
        data = self._get_json("/products", params=params)
        return data if isinstance(data, list) else []

    def get_product(self, product_id) -> Optional[Dict[str, Any]]:
        data = self._get_json(f"/products/{product_id}")
        return data if isinstance(data, dict) else None

    def list_categories(self) -> List[str]:
        data = self._get_json("/categories")
        return data if isinstance(data, list) else []

    # Newsletter / contact
    def subscribe(self, email: str) -> Dict[str, Any]:
        return self._post_json("/newsletter/subscribe", {"email": email})

    def contact(self, name: str, email: str, message: str) -> Dict[str, Any]:
        return self._post_json("/contact", {"name": name, "email": email, "message": message})

    # Cart
    def add_to_cart(self, product_id, quantity: int = 1) -> Dict[str, Any]:
        return self._post_json("/cart/add", {"productId": str(product_id), "quantity": quantity})

    # Async listing (example)
    async def list_products_async(self, category: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None) -> List[Dict[str, Any]]:
        params = {"category": category} if category is not None else None
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=transport) as client:
                r = await client.get(f"{self.base_url}/products", params=params)
                r.raise_for_status()
                data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("GET /products failed: %s", e)
            return []
        return data if isinstance(data, list) else []


def format_price(paise: int) -> str:
    return f"₹{paise / 100:,.2f}"


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Storefront CLI")
    parser.add_argument("--base-url", default=settings.API_URL, help="API base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---------------------------
    # Catalog commands
    # ---------------------------
    lp = subparsers.add_parser("list-products", help="List all products")
    lp.add_argument("--category", help="Filter products by category (exact match)")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    subparsers.add_parser("categories", help="List categories")

    # ---------------------------
    # Newsletter / contact
    # ---------------------------
    sub = subparsers.add_parser("subscribe", help="Subscribe to the newsletter")
    sub.add_argument("--email", required=True, help="Subscriber email")

    ct = subparsers.add_parser("contact", help="Send the contact form")
    ct.add_argument("--name", required=True)
    ct.add_argument("--email", required=True)
    ct.add_argument("--message", required=True)

    # ---------------------------
    # Cart
    # ---------------------------
    add = subparsers.add_parser("add-to-cart", help="Add product to cart")
    add.add_argument("--product-id", required=True, help="Product ID")
    add.add_argument("--qty", type=int, default=1, help="Quantity to add")

    args = parser.parse_args()
    c = StoreClient(base_url=args.base_url)

    if args.command == "list-products":
        print(c.list_products(args.category))
    elif args.command == "get-product":
        print(c.get_product(args.product_id) or f"[yellow]No product with id {args.product_id}[/yellow]")
    elif args.command == "categories":
        print(c.list_categories())
    elif args.command == "subscribe":
        print(c.subscribe(args.email))
    elif args.command == "contact":
        print(c.contact(args.name, args.email, args.message))
    elif args.command == "add-to-cart":
        print(c.add_to_cart(args.product_id, args.qty))
