#!/usr/bin/env python
from sdk.storeclient import StoreClient, format_price

def main():
    c = StoreClient()
    print(f"Talking to {c.base_url}")

    # -----------------------------
    # Catalog
    # -----------------------------
    print("\nListing products...")
    products = c.list_products()
    for p in products:
        print(f"  #{p['id']} {p['name']} ({p['category']}) {format_price(p['price'])}")
    if not products:
        print("  nothing returned, is the server running?")
        return

    print("\nCategories...")
    categories = c.list_categories()
    print(categories)

    if not categories:
        print("  no categories returned")
        return

    first = categories[0]
    print(f"\nProducts in '{first}'...")
    print([p["name"] for p in c.list_products(first)])

    print("\nFetching product 2...")
    print(c.get_product(2))

    print("\nFetching a product that doesn't exist...")
    print(c.get_product(999))

    # -----------------------------
    # Cart
    # -----------------------------
    print("\nAdding two of the first product to the cart...")
    print(c.add_to_cart(products[0]["id"], 2))

    # -----------------------------
    # Newsletter / contact
    # -----------------------------
    print("\nSubscribing twice...")
    print(c.subscribe("asha@example.com"))
    print(c.subscribe("asha@example.com"))

    print("\nSending the contact form...")
    print(c.contact("Asha", "asha@example.com", "Do you resize rings?"))

if __name__ == "__main__":
    main()
