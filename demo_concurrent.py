import asyncio
import httpx
from sdk.pystore import StoreClient

async def create(client, ac, i):
    r = await client.create_product_async(f"Widget {i}", "Concurrent demo item", 10 + i, "demo", client=ac)
    if r.status_code == 201:
        print(f"✅ created {r.json()['id']} (Widget {i})")
    else:
        print(f"❌ Widget {i} failed with HTTP {r.status_code}: {r.text}")
    return r

async def main():
    c = StoreClient(base_url="http://127.0.0.1:3000")

    print("\n⚡ Creating 20 products concurrently...")
    async with httpx.AsyncClient(timeout=c.timeout) as ac:
        results = await asyncio.gather(*(create(c, ac, i) for i in range(20)))

    ids = [r.json()["id"] for r in results if r.status_code == 201]
    print(f"\n🆔 {len(ids)} created, {len(set(ids))} distinct ids")
    print("📊 Stats:", c.stats())

    for pid in ids:
        c.delete_product(pid)
    print("🧹 Cleaned up, stats:", c.stats())

if __name__ == "__main__":
    asyncio.run(main())
