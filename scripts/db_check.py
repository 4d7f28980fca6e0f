from sqlalchemy import inspect, text

from storefront_api.db import get_public_client

TABLES = ("products", "categories", "pc_builds", "promotions", "bundles")


def main():
    client = get_public_client()
    existing = set(inspect(client.engine).get_table_names())
    with client.engine.connect() as conn:
        for table in TABLES:
            exists = table in existing
            print(f'{table}_table_exists:', exists)
            if exists:
                cnt = conn.execute(text(f'SELECT COUNT(*) FROM {table}')).scalar()
                print(f'{table}_row_count:', cnt)

if __name__ == '__main__':
    main()
