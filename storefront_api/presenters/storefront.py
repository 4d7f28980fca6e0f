from typing import Dict, List

from ..schemas.bundle import BundleOut
from ..schemas.category import CategoryOut
from ..schemas.pc_build import PCBuildOut
from ..schemas.product import ProductOut
from ..schemas.promotion import PromotionOut
from ..schemas.views import (
    BuildComponentView,
    BundleView,
    CategoryLinkView,
    PCBuildView,
    PromotionView,
)
from ..services.pricing import build_total
from ..utils.text import oxford_join
from .product_card import money, percent_label, render_product_card


def category_link(category: CategoryOut) -> CategoryLinkView:
    return CategoryLinkView(name=category.name, href=f"/categories/{category.slug}", image=category.image)


def render_bundle(bundle: BundleOut, names: Dict[str, str]) -> BundleView:
    members = [names[pid] for pid in bundle.products if pid in names]
    discounted = bundle.discounted_price < bundle.total_price
    return BundleView(
        id=bundle.id,
        name=bundle.name,
        summary=f"Includes {oxford_join(members)}." if members else bundle.description,
        image=bundle.image,
        display_price=money(bundle.discounted_price if discounted else bundle.total_price),
        original_price=money(bundle.total_price) if discounted else None,
    )


def render_promotion(promotion: PromotionOut) -> PromotionView:
    parts = []
    if promotion.discount_percent:
        parts.append(f"{percent_label(promotion.discount_percent)}% off")
    if promotion.discount_amount:
        parts.append(f"${money(promotion.discount_amount)} off")
    headline = " + ".join(parts)
    if promotion.min_purchase:
        headline += f" on orders over ${money(promotion.min_purchase)}"
    return PromotionView(code=promotion.code, name=promotion.name, headline=headline)


def render_build(build: PCBuildOut, products: Dict[str, ProductOut]) -> PCBuildView:
    components = []
    for slot, product_id in build.components.items():
        product = products.get(product_id)
        components.append(BuildComponentView(
            slot=slot,
            product=render_product_card(product, show_add_to_cart=False) if product else None,
        ))
    prices = {pid: p.price for pid, p in products.items()}
    return PCBuildView(
        id=build.id,
        name=build.name,
        components=components,
        total_price=money(build_total(build.components, prices)),
    )


def build_product_ids(builds: List[PCBuildOut]) -> List[str]:
    return sorted({pid for b in builds for pid in b.components.values()})
