from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Any, Dict, List, Optional
import uuid
import logging

from ..models.product import Product
from ..schemas.product import ProductCreate, ProductUpdate, specs_to_mapping
from ..services.errors import DuplicateSkuError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


def is_duplicate_sku(error: IntegrityError) -> bool:
    """True when an IntegrityError is the store rejecting a repeated SKU."""
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    message = str(orig).lower()
    if "sku" not in message:
        return False
    return code == UNIQUE_VIOLATION or "unique" in message or "uq_products_sku" in message


def _column_values(data: ProductCreate | ProductUpdate, exclude_unset: bool = False) -> Dict[str, Any]:
    values = data.model_dump(exclude_unset=exclude_unset, exclude={"specs"})
    if "specs" in data.model_fields_set or not exclude_unset:
        values["specs"] = specs_to_mapping(data.specs or [])
    return values


def _commit(db: Session, product: Product, sku: Optional[str]) -> Product:
    try:
        db.commit()
        db.refresh(product)
        return product
    except IntegrityError as e:
        db.rollback()
        if is_duplicate_sku(e):
            raise DuplicateSkuError(sku) from e
        raise
    except SQLAlchemyError:
        db.rollback()
        raise


def create_product(db: Session, data: ProductCreate) -> Product:
    """Insert a product row.

    Raises:
        DuplicateSkuError: If the store already holds a product with this SKU
    """
    product = Product(id=str(uuid.uuid4()), **_column_values(data))
    db.add(product)
    return _commit(db, product, data.sku)


def update_product(db: Session, product_id: str, data: ProductUpdate) -> Optional[Product]:
    product = get_product(db, product_id)
    if not product:
        return None
    for field, value in _column_values(data, exclude_unset=True).items():
        setattr(product, field, value)
    return _commit(db, product, data.sku or product.sku)


def delete_product(db: Session, product_id: str) -> bool:
    product = get_product(db, product_id)
    if not product:
        return False
    try:
        db.delete(product)
        db.commit()
        return True
    except SQLAlchemyError:
        db.rollback()
        raise


def get_product(db: Session, product_id: str) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()


def list_products(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.created_at.desc()).all()


def list_featured_products(db: Session, limit: int = 4) -> List[Product]:
    return db.query(Product).filter(Product.is_featured.is_(True)).limit(limit).all()


def list_products_in_category(db: Session, category_id: str) -> List[Product]:
    return db.query(Product).filter(Product.category_id == category_id).all()


def list_products_by_ids(db: Session, product_ids: List[str]) -> List[Product]:
    if not product_ids:
        return []
    return db.query(Product).filter(Product.id.in_(product_ids)).all()