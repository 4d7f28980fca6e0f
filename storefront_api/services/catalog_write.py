"""
Catalog Write Service

Create, update and delete product rows. Field validation happens on the
pydantic models before any store call; store failures are translated into
the catalog error taxonomy, with a repeated SKU reported separately.
"""

import logging
from typing import Any, Dict, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..repositories import products as products_repo
from ..schemas.product import ProductCreate, ProductOut, ProductUpdate
from .catalog_read import ProductListCache
from .errors import CatalogWriteError, DuplicateSkuError, ProductNotFoundError

logger = logging.getLogger(__name__)


class CatalogWriteService:
    def __init__(self, db: Session, cache: Optional[ProductListCache] = None):
        self.db = db
        self.cache = cache

    def _changed(self) -> None:
        # Displayed lists refetch on next read instead of being patched
        if self.cache is not None:
            self.cache.invalidate()

    def create_product(self, fields: Union[ProductCreate, Dict[str, Any]]) -> ProductOut:
        data = fields if isinstance(fields, ProductCreate) else ProductCreate.model_validate(fields)
        try:
            product = products_repo.create_product(self.db, data)
        except DuplicateSkuError:
            logger.warning(f"Rejected product create, duplicate SKU {data.sku!r}")
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error saving product {data.sku!r}: {e}")
            raise CatalogWriteError() from e

        self._changed()
        logger.info(f"Product created: {product.sku} (ID: {product.id})")
        return ProductOut.model_validate(product)

    def update_product(self, product_id: str, fields: Union[ProductUpdate, Dict[str, Any]]) -> ProductOut:
        data = fields if isinstance(fields, ProductUpdate) else ProductUpdate.model_validate(fields)
        try:
            product = products_repo.update_product(self.db, product_id, data)
        except DuplicateSkuError:
            logger.warning(f"Rejected update of product {product_id}, duplicate SKU {data.sku!r}")
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error updating product {product_id}: {e}")
            raise CatalogWriteError() from e

        if product is None:
            logger.warning(f"Product not found for update: {product_id}")
            raise ProductNotFoundError(product_id)

        self._changed()
        logger.info(f"Product updated: {product.sku} (ID: {product.id})")
        return ProductOut.model_validate(product)

    def delete_product(self, product_id: str) -> None:
        try:
            deleted = products_repo.delete_product(self.db, product_id)
        except SQLAlchemyError as e:
            logger.error(f"Error deleting product {product_id}: {e}")
            raise CatalogWriteError("Failed to delete product. Please try again.") from e

        if not deleted:
            logger.warning(f"Product not found for deletion: {product_id}")
            raise ProductNotFoundError(product_id)

        self._changed()
        logger.info(f"Product deleted: {product_id}")
