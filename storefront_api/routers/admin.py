from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query

from ..config import settings
from ..presenters.admin_shell import render_admin_shell
from ..presenters.dashboard import render_dashboard_cards
from ..presenters.product_form import apply_image_edit, render_product_form
from ..presenters.products_table import render_products_table
from ..schemas.product import ProductCreate, ProductUpdate
from ..schemas.views import (
    AdminDashboardPage,
    AdminProductFormPage,
    AdminProductsPage,
    ImageListEdit,
    WriteResult,
)
from ..services.catalog_read import CatalogReadService, SortState
from ..services.catalog_write import CatalogWriteService
from ..services.errors import ConfirmationRequiredError, ProductNotFoundError
from .deps import get_admin_read_service, get_write_service

router = APIRouter()

SortColumn = Literal["name", "price", "stock", "brand", "sku"]


def _shell(path: str):
    return render_admin_shell(path, settings.store_name)


@router.get("", response_model=AdminDashboardPage)
def dashboard():
    return AdminDashboardPage(
        shell=_shell("/admin"),
        subtitle=f"Welcome to the {settings.store_name} admin dashboard.",
        cards=render_dashboard_cards(),
    )


@router.get("/products", response_model=AdminProductsPage)
def products_table(
    search: str = "",
    sort_by: Optional[SortColumn] = None,
    order: Literal["asc", "desc"] = "asc",
    service: CatalogReadService = Depends(get_admin_read_service),
):
    products = service.list_products()
    table = render_products_table(
        products,
        service.category_names(),
        search=search,
        sort=SortState(sort_by, order),
    )
    return AdminProductsPage(shell=_shell("/admin/products"), table=table)


@router.delete("/products/{product_id}", response_model=WriteResult)
def delete_product(
    product_id: str,
    confirm: bool = Query(default=False, description="Must be true; deletion is irreversible"),
    service: CatalogWriteService = Depends(get_write_service),
):
    if not confirm:
        raise ConfirmationRequiredError()
    service.delete_product(product_id)
    return WriteResult(message="Product deleted successfully!")


@router.get("/products/new", response_model=AdminProductFormPage)
def new_product_form(service: CatalogReadService = Depends(get_admin_read_service)):
    form = render_product_form(service.list_categories())
    return AdminProductFormPage(shell=_shell("/admin/products/new"), form=form)


@router.post("/products/new", response_model=WriteResult, status_code=201)
def create_product(data: ProductCreate, service: CatalogWriteService = Depends(get_write_service)):
    product = service.create_product(data)
    return WriteResult(
        message="Product created successfully!",
        redirect="/admin/products",
        product=product.model_dump(mode="json"),
    )


@router.post("/products/form/images", response_model=List[str])
def edit_image_list(edit: ImageListEdit):
    return apply_image_edit(edit)


@router.get("/products/edit/{product_id}", response_model=AdminProductFormPage)
def edit_product_form(product_id: str, service: CatalogReadService = Depends(get_admin_read_service)):
    product = service.get_product(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    form = render_product_form(service.list_categories(), product)
    return AdminProductFormPage(shell=_shell(f"/admin/products/edit/{product_id}"), form=form)


@router.put("/products/edit/{product_id}", response_model=WriteResult)
def update_product(
    product_id: str,
    data: ProductUpdate,
    service: CatalogWriteService = Depends(get_write_service),
):
    product = service.update_product(product_id, data)
    return WriteResult(
        message="Product updated successfully!",
        redirect="/admin/products",
        product=product.model_dump(mode="json"),
    )
