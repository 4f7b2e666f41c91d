#!/usr/bin/env python
from sdk.pystore import StoreClient

def main():
    c = StoreClient(base_url="http://127.0.0.1:3000")

    print(c.welcome())

    # -----------------------------
    # Create products
    # -----------------------------
    print("\nCreating products...")
    kettle = c.create_product("Kettle", "1.7L electric kettle", 35, "kitchen", in_stock=True)
    headphones = c.create_product("Headphones", "Noise cancelling", 199.99, "electronics")
    print(kettle)
    print(headphones)

    # -----------------------------
    # List, filter, paginate
    # -----------------------------
    print("\nFirst page (2 per page)...")
    print(c.list_products(limit=2))
    print("\nKitchen only...")
    print(c.list_products(category="kitchen"))

    # -----------------------------
    # Search and stats
    # -----------------------------
    print("\nSearching for 'lap'...")
    print(c.search_products("lap"))
    print("\nStats...")
    print(c.stats())

    # -----------------------------
    # Update and delete
    # -----------------------------
    print("\nMarking the kettle out of stock...")
    print(c.update_product(kettle["id"], "Kettle", "1.7L electric kettle", 35, "kitchen", in_stock=False))

    print("\nDeleting the headphones...")
    c.delete_product(headphones["id"])
    print(c.stats())

if __name__ == "__main__":
    main()
