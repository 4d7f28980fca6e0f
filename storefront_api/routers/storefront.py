import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends

from ..config import settings
from ..presenters.product_card import render_product_card
from ..presenters.storefront import (
    build_product_ids,
    category_link,
    render_build,
    render_bundle,
    render_promotion,
)
from ..schemas.views import CategoryPage, HomePage, PCBuilderPage, ProductsPage
from ..services.catalog_read import CatalogReadService, SortState
from ..services.errors import CatalogLoadError, CategoryNotFoundError
from .deps import get_read_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=HomePage)
def home(service: CatalogReadService = Depends(get_read_service)):
    # Home page sections degrade to empty instead of failing the whole page
    try:
        featured = service.list_featured_products(settings.featured_limit)
    except CatalogLoadError as e:
        logger.error(f"Error fetching featured products: {e}")
        featured = []
    try:
        categories = service.list_categories(settings.home_category_limit)
    except CatalogLoadError as e:
        logger.error(f"Error fetching categories: {e}")
        categories = []
    try:
        bundles = service.list_active_bundles()
        promotions = service.list_active_promotions()
        member_ids = sorted({pid for b in bundles for pid in b.products})
        names = {p.id: p.name for p in service.list_products_by_ids(member_ids)}
    except CatalogLoadError as e:
        logger.error(f"Error fetching offers: {e}")
        bundles, promotions, names = [], [], {}

    return HomePage(
        store_name=settings.store_name,
        featured=[render_product_card(p) for p in featured],
        categories=[category_link(c) for c in categories],
        bundles=[render_bundle(b, names) for b in bundles],
        promotions=[render_promotion(p) for p in promotions],
    )


@router.get("/products", response_model=ProductsPage)
def products(
    q: str = "",
    sort_by: Optional[Literal["name", "price", "stock", "brand", "sku"]] = None,
    order: Literal["asc", "desc"] = "asc",
    service: CatalogReadService = Depends(get_read_service),
):
    rows = service.search_products(q, SortState(sort_by, order))
    return ProductsPage(search=q, products=[render_product_card(p) for p in rows], total=len(rows))


@router.get("/categories/{slug}", response_model=CategoryPage)
def category(slug: str, service: CatalogReadService = Depends(get_read_service)):
    found = service.get_category_by_slug(slug)
    if found is None:
        raise CategoryNotFoundError()
    rows = service.list_products_in_category(found.id)
    return CategoryPage(category=found, products=[render_product_card(p) for p in rows])


@router.get("/pc-builder", response_model=PCBuilderPage)
def pc_builder(service: CatalogReadService = Depends(get_read_service)):
    builds = service.list_public_builds()
    products = {p.id: p for p in service.list_products_by_ids(build_product_ids(builds))}
    candidates = service.list_products()
    return PCBuilderPage(
        builds=[render_build(b, products) for b in builds],
        candidates=[render_product_card(p, show_pc_builder=True) for p in candidates],
    )
