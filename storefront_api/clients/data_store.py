import logging
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)


def with_credentials(url: str, role: Optional[str] = None, key: Optional[str] = None) -> URL:
    """Attach a credential tier (role + key) to the store URL.

    File-based SQLite URLs have no notion of roles, so they are returned as-is.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        return parsed
    if role:
        parsed = parsed.set(username=role)
    if key:
        parsed = parsed.set(password=key)
    return parsed


class DataClient:
    """Connection to the hosted catalog store under one credential tier."""

    def __init__(
        self,
        url: str,
        role: Optional[str] = None,
        key: Optional[str] = None,
        connect_timeout: int = 10,
        **engine_kwargs,
    ):
        self.url = with_credentials(url, role, key)
        self.role = role

        connect_args = dict(engine_kwargs.pop("connect_args", {}))
        backend = self.url.get_backend_name()
        if backend == "postgresql":
            connect_args.setdefault("connect_timeout", connect_timeout)
        elif backend == "sqlite":
            connect_args.setdefault("check_same_thread", False)

        self.engine = create_engine(
            self.url,
            pool_pre_ping=backend != "sqlite",
            connect_args=connect_args,
            **engine_kwargs,
        )
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Data store ping failed for role {self.role!r}: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()
