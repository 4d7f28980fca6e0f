import json
from fastapi.testclient import TestClient

from storefront_api.main import app


def main():
    client = TestClient(app)

    # 1) Storefront home
    r = client.get("/")
    print("HOME STATUS:", r.status_code)
    print("HOME BODY:", json.dumps(r.json(), indent=2)[:1500])

    # 2) Admin products table, cheapest first
    r2 = client.get("/admin/products", params={"sort_by": "price", "order": "asc"})
    print("ADMIN PRODUCTS STATUS:", r2.status_code)
    print("ADMIN PRODUCTS BODY:", json.dumps(r2.json(), indent=2)[:1500])


if __name__ == "__main__":
    main()
