import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .clients.data_store import DataClient
from .config import settings
from .db import get_public_client
from .routers.admin import router as admin_router
from .routers.storefront import router as storefront_router
from .services.catalog_read import configure_collation
from .services.errors import (
    CatalogError,
    CatalogLoadError,
    CatalogWriteError,
    CategoryNotFoundError,
    ConfirmationRequiredError,
    DuplicateSkuError,
    ProductNotFoundError,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

configure_collation()

app = FastAPI(title="Tech Haven Storefront API", version="0.1.0", debug=settings.app_debug)

# CORS
origins = [o.strip() for o in (settings.cors_origins or "").split(",") if o.strip()] or ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {
    ConfirmationRequiredError: 400,
    ProductNotFoundError: 404,
    CategoryNotFoundError: 404,
    DuplicateSkuError: 409,
    CatalogWriteError: 500,
    CatalogLoadError: 503,
}


@app.exception_handler(CatalogError)
def catalog_error_handler(request: Request, exc: CatalogError):
    status_code = next((code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)), 500)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.get("/health")
def health(client: DataClient = Depends(get_public_client)):
    return {"status": "ok", "data_store": "up" if client.ping() else "down"}


# Routers
app.include_router(admin_router, prefix="/admin", tags=["admin"])
app.include_router(storefront_router, tags=["storefront"])
