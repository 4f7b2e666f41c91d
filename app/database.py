import asyncio
import copy
import uuid
from typing import Any, Callable, Dict, Iterable, List, Optional

from .errors import ApiError, ErrorKind

# This file holds the in-memory product collection and its lock.

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]

def generate_id() -> str:
    return str(uuid.uuid4())

class ProductStore:
    """Ordered, in-memory collection of product records.

    Every operation runs under a single asyncio.Lock, so a lookup followed by
    a mutation can't interleave with another request's. Records are copied on
    the way in and out; nothing outside the store holds a live reference.
    """

    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None, id_factory: Callable[[], str] = generate_id):
        self._products: List[Dict[str, Any]] = copy.deepcopy(list(SEED_PRODUCTS if seed is None else seed))
        self._id_factory = id_factory
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._products)

    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p["id"] == product_id:
                return i
        raise ApiError(ErrorKind.NOT_FOUND)

    async def all(self) -> List[Dict[str, Any]]:
        async with self._lock:
            return [dict(p) for p in self._products]

    async def get(self, product_id: str) -> Dict[str, Any]:
        async with self._lock:
            return dict(self._products[self._index_of(product_id)])

    async def insert(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        async with self._lock:
            pid = self._id_factory()
            if any(p["id"] == pid for p in self._products):
                raise RuntimeError(f"id generator returned a duplicate id: {pid}")
            product = {"id": pid, **{k: v for k, v in fields.items() if k != "id"}}
            self._products.append(product)
            return dict(product)

    async def update(self, product_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        async with self._lock:
            idx = self._index_of(product_id)
            updated = {**self._products[idx], **fields, "id": product_id}
            self._products[idx] = updated
            return dict(updated)

    async def delete(self, product_id: str) -> None:
        async with self._lock:
            del self._products[self._index_of(product_id)]

    async def stats(self) -> Dict[str, int]:
        async with self._lock:
            counts: Dict[str, int] = {}
            for p in self._products:
                counts[p["category"]] = counts.get(p["category"], 0) + 1
            return counts
