# tests/test_concurrency.py
import asyncio
import httpx

from app.database import ProductStore
from app.main import create_app
from conftest import API_KEY, new_product

async def _create_task(ac, i):
    return await ac.post("/api/products", json=new_product(name=f"item-{i}"))

async def _run_concurrent_creates(app, n):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test", headers={"x-api-key": API_KEY}) as ac:
        return await asyncio.gather(*(_create_task(ac, i) for i in range(n)))

def test_concurrent_creates_have_unique_ids(settings):
    store = ProductStore()
    app = create_app(settings=settings, store=store)

    results = asyncio.run(_run_concurrent_creates(app, 25))
    assert [r.status_code for r in results] == [201] * 25
    ids = [r.json()["id"] for r in results]
    assert len(set(ids)) == 25
    assert len(store) == 28

async def _mixed(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test", headers={"x-api-key": API_KEY}) as ac:
        return await asyncio.gather(
            ac.put("/api/products/1", json=new_product(name="A", category="electronics")),
            ac.put("/api/products/1", json=new_product(name="B", category="electronics")),
            ac.delete("/api/products/2"),
            ac.get("/api/products/stats"),
        )

def test_interleaved_mutations_leave_consistent_store(settings):
    store = ProductStore()
    app = create_app(settings=settings, store=store)
    results = asyncio.run(_mixed(app))
    assert results[0].status_code == 200
    assert results[1].status_code == 200
    assert results[2].status_code == 204
    assert asyncio.run(store.get("1"))["name"] in ("A", "B")
    assert len(store) == 2
