from typing import Optional, Dict, Any, List

from .database import ProductStore
from .errors import ApiError, ErrorKind

# This file contains the core logic for all product endpoints.

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

def _parse_positive_int(raw: Optional[str], name: str, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ApiError(ErrorKind.VALIDATION, f"{name} must be a positive integer")
    if value < 1:
        raise ApiError(ErrorKind.VALIDATION, f"{name} must be a positive integer")
    return value

# Read endpoints
async def list_products_logic(store: ProductStore, category: Optional[str] = None,
                              page: Optional[str] = None, limit: Optional[str] = None) -> Dict[str, Any]:
    page_no = _parse_positive_int(page, "page", DEFAULT_PAGE)
    page_size = _parse_positive_int(limit, "limit", DEFAULT_LIMIT)

    products = await store.all()
    if category:
        products = [p for p in products if p.get("category") == category]

    start = (page_no - 1) * page_size
    return {
        "page": page_no,
        "limit": page_size,
        "total": len(products),
        "products": products[start:start + page_size],
    }

async def get_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    return await store.get(product_id)

async def search_products_logic(store: ProductStore, q: Optional[str]) -> List[Dict[str, Any]]:
    if not q:
        raise ApiError(ErrorKind.MISSING_PARAMETER, 'Query parameter "q" is required')
    term = q.lower()
    return [p for p in await store.all() if term in str(p.get("name", "")).lower()]

async def stats_logic(store: ProductStore) -> Dict[str, int]:
    return await store.stats()

# Write endpoints
async def create_product_logic(store: ProductStore, fields: Dict[str, Any]) -> Dict[str, Any]:
    return await store.insert(fields)

async def update_product_logic(store: ProductStore, product_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
    return await store.update(product_id, fields)

async def delete_product_logic(store: ProductStore, product_id: str) -> None:
    await store.delete(product_id)
