from functools import lru_cache
from typing import Iterator

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Session

from .clients.data_store import DataClient
from .config import settings


class Base(DeclarativeBase):
    pass


# JSONB on the hosted Postgres store, plain JSON elsewhere (local SQLite)
JSONType = JSON().with_variant(JSONB(), "postgresql")


@lru_cache(maxsize=1)
def get_public_client() -> DataClient:
    return DataClient(
        settings.data_store_url,
        role=settings.data_store_anon_role,
        key=settings.data_store_anon_key,
        connect_timeout=settings.db_connect_timeout,
    )


@lru_cache(maxsize=1)
def get_admin_client() -> DataClient:
    """Privileged client. Only the admin routers may depend on this."""
    client = DataClient(
        settings.data_store_url,
        role=settings.data_store_service_role,
        key=settings.data_store_service_key,
        connect_timeout=settings.db_connect_timeout,
    )
    if client.url.get_backend_name() != "sqlite" and not settings.data_store_service_key:
        client.dispose()
        raise RuntimeError("DATA_STORE_SERVICE_KEY is required for admin operations")
    return client


def get_db() -> Iterator[Session]:
    db = get_public_client().session()
    try:
        yield db
    finally:
        db.close()


def get_admin_db() -> Iterator[Session]:
    db = get_admin_client().session()
    try:
        yield db
    finally:
        db.close()
