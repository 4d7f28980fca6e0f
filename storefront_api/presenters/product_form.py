from typing import List, Optional

from ..schemas.category import CategoryOut
from ..schemas.product import ProductOut
from ..schemas.views import CategoryOptionView, ImageListEdit, ProductFormValues, ProductFormView


def add_image(images: List[str], url: str) -> List[str]:
    """Append a trimmed URL; blank input leaves the list unchanged."""
    url = (url or "").strip()
    if not url:
        return list(images)
    return [*images, url]


def remove_image(images: List[str], index: int) -> List[str]:
    return [img for i, img in enumerate(images) if i != index]


def apply_image_edit(edit: ImageListEdit) -> List[str]:
    images = list(edit.images)
    if edit.remove is not None:
        images = remove_image(images, edit.remove)
    if edit.add is not None:
        images = add_image(images, edit.add)
    return images


def render_product_form(categories: List[CategoryOut], product: Optional[ProductOut] = None) -> ProductFormView:
    options = [CategoryOptionView(value=c.id, label=c.name) for c in categories]
    if product is None:
        return ProductFormView(
            mode="create",
            title="Add New Product",
            subtitle="Create a new product for your store",
            action="/admin/products/new",
            method="POST",
            submit_label="Create Product",
            values=ProductFormValues(),
            categories=options,
        )

    values = ProductFormValues(
        name=product.name,
        description=product.description,
        price=product.price,
        category_id=product.category_id,
        stock=product.stock,
        brand=product.brand,
        sku=product.sku,
        is_featured=product.is_featured,
        discount_percent=product.discount_percent or 0,
        images=product.images,
        specs=product.specs,
    )
    return ProductFormView(
        mode="edit",
        title="Edit Product",
        subtitle=f"Update {product.name}",
        action=f"/admin/products/edit/{product.id}",
        method="PUT",
        submit_label="Update Product",
        values=values,
        categories=options,
    )
