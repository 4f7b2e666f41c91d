# sdk/pystore.py
import argparse
import json
import requests
import httpx
from typing import Any, Dict, Optional
from rich import print

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_API_KEY = "your-secret-api-key"

class StoreClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, api_key: str = DEFAULT_API_KEY, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = requests.Session()
        self.timeout = timeout
        self.session.headers.update({"x-api-key": api_key})

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def welcome(self) -> str:
        r = self.session.get(self._url("/"), timeout=self.timeout)
        r.raise_for_status()
        return r.text

    # Products: reads
    def list_products(self, category: Optional[str] = None, page: Optional[int] = None, limit: Optional[int] = None):
        params = {}
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(self._url("/api/products"), params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def search_products(self, q: str):
        r = self.session.get(self._url("/api/products/search"), params={"q": q}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def stats(self) -> Dict[str, int]:
        r = self.session.get(self._url("/api/products/stats"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Products: writes
    @staticmethod
    def _product_payload(name, description, price, category, in_stock=None, **extra) -> Dict[str, Any]:
        payload = {"name": name, "description": description, "price": price, "category": category, **extra}
        if in_stock is not None:
            payload["inStock"] = in_stock
        return payload

    def create_product(self, name: str, description: str, price: float, category: str,
                       in_stock: Optional[bool] = None, **extra):
        payload = self._product_payload(name, description, price, category, in_stock, **extra)
        r = self.session.post(self._url("/api/products"), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: str, name: str, description: str, price: float, category: str,
                       in_stock: Optional[bool] = None, **extra):
        payload = self._product_payload(name, description, price, category, in_stock, **extra)
        r = self.session.put(self._url(f"/api/products/{product_id}"), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str) -> None:
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()

    # Async create, used by the concurrency demo
    async def create_product_async(self, name: str, description: str, price: float, category: str,
                                   in_stock: Optional[bool] = None, client: Optional[httpx.AsyncClient] = None):
        payload = self._product_payload(name, description, price, category, in_stock)
        headers = {"x-api-key": self.api_key}
        if client is not None:
            return await client.post(self._url("/api/products"), json=payload, headers=headers)
        async with httpx.AsyncClient(timeout=self.timeout) as ac:
            return await ac.post(self._url("/api/products"), json=payload, headers=headers)


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "y"):
        return True
    if value in ("0", "false", "no", "n"):
        return False
    raise argparse.ArgumentTypeError(f"expected true/false, got {raw!r}")

def _add_product_args(p: argparse.ArgumentParser):
    p.add_argument("--name", required=True, help="Product name")
    p.add_argument("--description", required=True, help="Product description")
    p.add_argument("--price", type=float, required=True, help="Price")
    p.add_argument("--category", required=True, help="Product category")
    p.add_argument("--in-stock", type=_parse_bool, default=None, help="true/false")

def main(argv=None):
    parser = argparse.ArgumentParser(description="Product API command line")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    parser.add_argument("--api-key", default=DEFAULT_API_KEY)
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Filter products by category")
    lp.add_argument("--page", type=int)
    lp.add_argument("--limit", type=int)

    sp = subparsers.add_parser("search", help="Search products by name")
    sp.add_argument("--q", required=True, help="Case-insensitive name fragment")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True)

    subparsers.add_parser("stats", help="Product count per category")

    cp = subparsers.add_parser("create-product", help="Create a product")
    _add_product_args(cp)

    up = subparsers.add_parser("update-product", help="Update a product")
    up.add_argument("--product-id", required=True)
    _add_product_args(up)

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    args = parser.parse_args(argv)
    c = StoreClient(base_url=args.base_url, api_key=args.api_key)

    if args.command == "list-products":
        print(c.list_products(args.category, args.page, args.limit))
    elif args.command == "search":
        print(c.search_products(args.q))
    elif args.command == "get-product":
        print(c.get_product(args.product_id))
    elif args.command == "stats":
        print(c.stats())
    elif args.command == "create-product":
        print(c.create_product(args.name, args.description, args.price, args.category, args.in_stock))
    elif args.command == "update-product":
        print(c.update_product(args.product_id, args.name, args.description, args.price, args.category, args.in_stock))
    elif args.command == "delete-product":
        c.delete_product(args.product_id)
        print(json.dumps({"deleted": args.product_id}))


if __name__ == "__main__":
    main()
