from ..schemas.product import ProductOut
from ..schemas.views import ActionView, ProductCardView
from ..services.pricing import discounted_price, to_money

PLACEHOLDER_IMAGE = "https://placehold.co/300x300"


def money(value) -> str:
    return f"{to_money(value):.2f}"


def percent_label(value) -> str:
    return f"{float(value):g}"


def render_product_card(
    product: ProductOut,
    show_add_to_cart: bool = True,
    show_pc_builder: bool = False,
    selected: bool = False,
) -> ProductCardView:
    """Storefront card for one product.

    A discount shows the reduced price with the original struck through;
    zero stock shows "Out of Stock" and disables add-to-cart.
    """
    reduced = discounted_price(product.price, product.discount_percent)
    in_stock = product.stock > 0

    card = ProductCardView(
        id=product.id,
        name=product.name,
        brand=product.brand,
        href=f"/products/{product.id}",
        image=product.images[0] if product.images else PLACEHOLDER_IMAGE,
        display_price=money(reduced if reduced is not None else product.price),
        original_price=money(product.price) if reduced is not None else None,
        discount_badge=f"-{percent_label(product.discount_percent)}%" if product.discount_percent else None,
        featured=product.is_featured,
        in_stock=in_stock,
        stock_notice=None if in_stock else "Out of Stock",
    )
    if show_add_to_cart:
        card.add_to_cart = ActionView(label="Add to Cart" if in_stock else "Sold Out", enabled=in_stock)
    if show_pc_builder:
        card.pc_builder_select = ActionView(label="Selected" if selected else "Select", enabled=in_stock)
    return card
