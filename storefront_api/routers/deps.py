from fastapi import Depends
from sqlalchemy.orm import Session

from ..db import get_admin_db, get_db
from ..services.catalog_read import CatalogReadService, ProductListCache, get_product_cache
from ..services.catalog_write import CatalogWriteService


def get_read_service(
    db: Session = Depends(get_db),
    cache: ProductListCache = Depends(get_product_cache),
) -> CatalogReadService:
    return CatalogReadService(db, cache)


# Admin services run on the privileged client; public routes never depend on these
def get_admin_read_service(
    db: Session = Depends(get_admin_db),
    cache: ProductListCache = Depends(get_product_cache),
) -> CatalogReadService:
    return CatalogReadService(db, cache)


def get_write_service(
    db: Session = Depends(get_admin_db),
    cache: ProductListCache = Depends(get_product_cache),
) -> CatalogWriteService:
    return CatalogWriteService(db, cache)
