from typing import Dict, List, Optional
from urllib.parse import urlencode

from ..schemas.product import ProductOut
from ..schemas.views import ProductRowView, ProductsTableView, TableColumnView
from ..services.catalog_read import SortState, filter_products, sort_products
from ..services.errors import ConfirmationRequiredError
from .product_card import PLACEHOLDER_IMAGE, money

TABLE_PATH = "/admin/products"

COLUMNS = [
    ("image", "Image", False),
    ("name", "Product Name", True),
    ("category", "Category", False),
    ("price", "Price", True),
    ("stock", "Stock", True),
    ("brand", "Brand", True),
    ("sku", "SKU", True),
]


def _table_href(search: str, state: SortState) -> str:
    params = {}
    if search:
        params["search"] = search
    if state.column:
        params["sort_by"] = state.column
        params["order"] = state.order
    return f"{TABLE_PATH}?{urlencode(params)}" if params else TABLE_PATH


def render_products_table(
    products: List[ProductOut],
    category_names: Dict[str, str],
    search: str = "",
    sort: Optional[SortState] = None,
) -> ProductsTableView:
    sort = sort or SortState()
    rows = sort_products(filter_products(products, search), sort)

    columns = []
    for key, label, sortable in COLUMNS:
        column = TableColumnView(key=key, label=label, sortable=sortable)
        if sortable:
            column.sort_href = _table_href(search, sort.toggle(key))
            column.sorted = sort.order if sort.column == key else None
        columns.append(column)

    return ProductsTableView(
        search=search,
        sort_by=sort.column,
        sort_order=sort.order,
        columns=columns,
        rows=[
            ProductRowView(
                id=p.id,
                image=p.images[0] if p.images else PLACEHOLDER_IMAGE,
                name=p.name,
                category=category_names.get(p.category_id, "Uncategorized"),
                price=money(p.price),
                stock=p.stock,
                brand=p.brand,
                sku=p.sku,
                view_href=f"/products/{p.id}",
                edit_href=f"{TABLE_PATH}/edit/{p.id}",
                delete_href=f"{TABLE_PATH}/{p.id}?confirm=true",
            )
            for p in rows
        ],
        total=len(rows),
        empty_message=None if rows else "No products found.",
        delete_prompt=ConfirmationRequiredError.message,
    )
