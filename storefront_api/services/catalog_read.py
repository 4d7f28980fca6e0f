"""
Catalog Read Service

Fetches whole table snapshots from the store and applies the products
table's search filter and column sort in process. There is no pagination
and no server-side filtering: every call reads the full table.
"""

import locale
import logging
import math
import threading
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..repositories import catalog as catalog_repo
from ..repositories import products as products_repo
from ..schemas.bundle import BundleOut
from ..schemas.category import CategoryOut
from ..schemas.pc_build import PCBuildOut
from ..schemas.product import ProductOut
from ..schemas.promotion import PromotionOut
from ..utils.dates import utcnow
from ..utils.text import contains_ci
from .errors import CatalogLoadError
from .pricing import promotion_is_live

logger = logging.getLogger(__name__)

T = TypeVar("T")

SORTABLE_COLUMNS = ("name", "price", "stock", "brand", "sku")
SEARCH_FIELDS = ("name", "brand", "sku")


@dataclass(frozen=True)
class SortState:
    """Single active sort column plus direction."""

    column: Optional[str] = None
    order: str = "asc"

    def toggle(self, column: str) -> "SortState":
        """Same column flips the direction; a new column starts ascending."""
        if column not in SORTABLE_COLUMNS:
            raise ValueError(f"Cannot sort by {column!r}")
        if column == self.column:
            return SortState(column, "desc" if self.order == "asc" else "asc")
        return SortState(column, "asc")


def filter_products(products: Iterable[T], term: Optional[str]) -> List[T]:
    """Case-insensitive substring match on name, brand and SKU."""
    products = list(products)
    if not term:
        return products
    return [
        p for p in products
        if any(contains_ci(getattr(p, field, None), term) for field in SEARCH_FIELDS)
    ]


def _as_number(value) -> Optional[float]:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(Decimal(value.strip()))
        except InvalidOperation:
            return None
    else:
        return None
    return None if math.isnan(number) else number


def configure_collation() -> str:
    """Adopt the environment's LC_COLLATE so string sorts follow the server locale."""
    try:
        return locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning(f"Locale collation unavailable, sorting by code point: {e}")
        return locale.setlocale(locale.LC_COLLATE)


def compare_values(a, b) -> int:
    if isinstance(a, str) and isinstance(b, str):
        return locale.strcoll(a.casefold(), b.casefold()) or locale.strcoll(a, b)
    x, y = _as_number(a), _as_number(b)
    if x is None or y is None:
        return 0
    return (x > y) - (x < y)


def sort_products(products: Iterable[T], state: SortState) -> List[T]:
    """Stable sort by the active column.

    Descending order keeps ties in their original relative order, so flipping
    the direction reverses everything except runs of equal values.
    """
    products = list(products)
    if not state.column:
        return products
    column = state.column
    key = cmp_to_key(lambda a, b: compare_values(getattr(a, column, None), getattr(b, column, None)))
    return sorted(products, key=key, reverse=state.order == "desc")


class ProductListCache:
    """One products-table snapshot, scoped to a single request.

    Every request starts empty, so changes made by other workers or straight
    in the store show up on the next page load. Within a request, writers call
    ``invalidate`` after a successful change and the next reader refetches
    instead of patching rows in place.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot: Optional[List[ProductOut]] = None

    def get(self, load: Callable[[], Sequence[ProductOut]]) -> List[ProductOut]:
        with self._lock:
            if self._snapshot is None:
                self._snapshot = list(load())
            return list(self._snapshot)

    def invalidate(self) -> None:
        with self._lock:
            self._snapshot = None

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None


def get_product_cache() -> ProductListCache:
    # FastAPI resolves a dependency once per request, so every service in
    # a request shares this snapshot
    return ProductListCache()


class CatalogReadService:
    def __init__(self, db: Session, cache: Optional[ProductListCache] = None):
        self.db = db
        self.cache = cache

    def _fetch(self, what: str, query: Callable[[], T]) -> T:
        try:
            return query()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching {what}: {e}")
            raise CatalogLoadError(f"Failed to load {what}. Please try again.") from e

    def _load_products(self) -> List[ProductOut]:
        rows = self._fetch("products", lambda: products_repo.list_products(self.db))
        return [ProductOut.model_validate(r) for r in rows]

    def list_products(self) -> List[ProductOut]:
        if self.cache is None:
            return self._load_products()
        return self.cache.get(self._load_products)

    def search_products(self, term: Optional[str] = None, sort: Optional[SortState] = None) -> List[ProductOut]:
        rows = filter_products(self.list_products(), term)
        return sort_products(rows, sort or SortState())

    def get_product(self, product_id: str) -> Optional[ProductOut]:
        row = self._fetch("product", lambda: products_repo.get_product(self.db, product_id))
        return ProductOut.model_validate(row) if row else None

    def list_featured_products(self, limit: int = 4) -> List[ProductOut]:
        rows = self._fetch("products", lambda: products_repo.list_featured_products(self.db, limit))
        return [ProductOut.model_validate(r) for r in rows]

    def list_products_in_category(self, category_id: str) -> List[ProductOut]:
        rows = self._fetch("products", lambda: products_repo.list_products_in_category(self.db, category_id))
        return [ProductOut.model_validate(r) for r in rows]

    def list_categories(self, limit: Optional[int] = None) -> List[CategoryOut]:
        rows = self._fetch("categories", lambda: catalog_repo.list_categories(self.db, limit))
        return [CategoryOut.model_validate(r) for r in rows]

    def category_names(self) -> Dict[str, str]:
        return {c.id: c.name for c in self.list_categories()}

    def get_category_by_slug(self, slug: str) -> Optional[CategoryOut]:
        row = self._fetch("category", lambda: catalog_repo.get_category_by_slug(self.db, slug))
        return CategoryOut.model_validate(row) if row else None

    def list_products_by_ids(self, product_ids: List[str]) -> List[ProductOut]:
        rows = self._fetch("products", lambda: products_repo.list_products_by_ids(self.db, product_ids))
        return [ProductOut.model_validate(r) for r in rows]

    def list_public_builds(self) -> List[PCBuildOut]:
        rows = self._fetch("PC builds", lambda: catalog_repo.list_public_builds(self.db))
        return [PCBuildOut.model_validate(r) for r in rows]

    def list_active_promotions(self, now: Optional[datetime] = None) -> List[PromotionOut]:
        now = now or utcnow()
        rows = self._fetch("promotions", lambda: catalog_repo.list_active_promotions(self.db))
        return [PromotionOut.model_validate(r) for r in rows if promotion_is_live(r, now)]

    def list_active_bundles(self) -> List[BundleOut]:
        rows = self._fetch("bundles", lambda: catalog_repo.list_active_bundles(self.db))
        return [BundleOut.model_validate(r) for r in rows]
