from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from .category import CategoryOut
from .product import SpecEntry


class ActionView(BaseModel):
    label: str
    enabled: bool = True


class LinkView(BaseModel):
    label: str
    href: str
    active: bool = False
    icon: Optional[str] = None


class ProductCardView(BaseModel):
    id: str
    name: str
    brand: str
    href: str
    image: str
    currency: str = "$"
    display_price: str = Field(description="Price shown in bold, two decimals")
    original_price: Optional[str] = Field(default=None, description="Struck-through price when discounted")
    discount_badge: Optional[str] = None
    featured: bool = False
    in_stock: bool = True
    stock_notice: Optional[str] = None
    rating: int = 4
    add_to_cart: Optional[ActionView] = None
    pc_builder_select: Optional[ActionView] = None
    wishlist: ActionView = ActionView(label="Wishlist")


class DashboardCardView(BaseModel):
    title: str
    value: str
    icon: str
    description: str


class AdminHeaderView(BaseModel):
    store_name: str
    tag: str = "Admin"
    home_href: str = "/admin"
    view_store: LinkView
    user_menu: List[str] = ["Profile", "Settings", "Logout"]


class AdminShellView(BaseModel):
    header: AdminHeaderView
    sidebar_title: str = "Admin Portal"
    sidebar: List[LinkView]


class TableColumnView(BaseModel):
    key: str
    label: str
    sortable: bool = False
    sort_href: Optional[str] = None
    sorted: Optional[Literal["asc", "desc"]] = None


class ProductRowView(BaseModel):
    id: str
    image: str
    name: str
    category: str
    price: str
    stock: int
    brand: str
    sku: str
    view_href: str
    edit_href: str
    delete_href: str


class ProductsTableView(BaseModel):
    search: str = ""
    sort_by: Optional[str] = None
    sort_order: Literal["asc", "desc"] = "asc"
    columns: List[TableColumnView]
    rows: List[ProductRowView]
    total: int
    empty_message: Optional[str] = None
    delete_prompt: str


class CategoryOptionView(BaseModel):
    value: str
    label: str


class ProductFormValues(BaseModel):
    name: str = ""
    description: str = ""
    price: float = 0
    category_id: str = ""
    stock: int = 0
    brand: str = ""
    sku: str = ""
    is_featured: bool = False
    discount_percent: float = 0
    images: List[str] = []
    specs: List[SpecEntry] = []


class ProductFormView(BaseModel):
    mode: Literal["create", "edit"]
    title: str
    subtitle: str
    action: str
    method: Literal["POST", "PUT"]
    submit_label: str
    back_href: str = "/admin/products"
    values: ProductFormValues
    categories: List[CategoryOptionView]


class ImageListEdit(BaseModel):
    images: List[str] = []
    add: Optional[str] = None
    remove: Optional[int] = None


class AdminDashboardPage(BaseModel):
    shell: AdminShellView
    title: str = "Dashboard"
    subtitle: str
    cards: List[DashboardCardView]


class AdminProductsPage(BaseModel):
    shell: AdminShellView
    title: str = "Products"
    subtitle: str = "Manage your product inventory and listings"
    add_href: str = "/admin/products/new"
    table: ProductsTableView


class AdminProductFormPage(BaseModel):
    shell: AdminShellView
    form: ProductFormView


class WriteResult(BaseModel):
    success: bool = True
    message: str
    redirect: Optional[str] = None
    product: Optional[Dict[str, Any]] = None


class CategoryLinkView(BaseModel):
    name: str
    href: str
    image: Optional[str] = None


class BundleView(BaseModel):
    id: str
    name: str
    summary: str
    image: Optional[str] = None
    display_price: str
    original_price: Optional[str] = None


class PromotionView(BaseModel):
    code: str
    name: str
    headline: str


class HomePage(BaseModel):
    store_name: str
    featured: List[ProductCardView]
    categories: List[CategoryLinkView]
    bundles: List[BundleView] = []
    promotions: List[PromotionView] = []


class ProductsPage(BaseModel):
    search: str = ""
    products: List[ProductCardView]
    total: int


class CategoryPage(BaseModel):
    category: CategoryOut
    products: List[ProductCardView]


class BuildComponentView(BaseModel):
    slot: str
    product: Optional[ProductCardView] = None


class PCBuildView(BaseModel):
    id: str
    name: str
    components: List[BuildComponentView]
    total_price: str


class PCBuilderPage(BaseModel):
    builds: List[PCBuildView]
    candidates: List[ProductCardView]
