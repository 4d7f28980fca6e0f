from datetime import datetime, timezone

from storefront_api.presenters.admin_shell import render_admin_shell
from storefront_api.presenters.dashboard import render_dashboard_cards
from storefront_api.presenters.product_card import PLACEHOLDER_IMAGE, render_product_card
from storefront_api.presenters.product_form import add_image, apply_image_edit, remove_image, render_product_form
from storefront_api.presenters.products_table import render_products_table
from storefront_api.presenters.storefront import render_build, render_bundle, render_promotion
from storefront_api.schemas.bundle import BundleOut
from storefront_api.schemas.category import CategoryOut
from storefront_api.schemas.pc_build import PCBuildOut
from storefront_api.schemas.product import ProductOut
from storefront_api.schemas.promotion import PromotionOut
from storefront_api.schemas.views import ImageListEdit
from storefront_api.services.catalog_read import SortState


def product(**overrides):
    fields = dict(
        id="p1", name="AMD Ryzen 5 5600X", description="6-core desktop processor", price=100,
        category_id="cat-cpu", stock=5, brand="AMD", sku="AMD-R5-5600X",
    )
    fields.update(overrides)
    return ProductOut(**fields)


class TestProductCard:

    def test_discounted_price(self):
        card = render_product_card(product(discount_percent=20))
        assert card.display_price == "80.00"
        assert card.original_price == "100.00"
        assert card.discount_badge == "-20%"

    def test_regular_price(self):
        card = render_product_card(product(price=549.9))
        assert card.display_price == "549.90"
        assert card.original_price is None
        assert card.discount_badge is None

    def test_zero_discount_is_no_discount(self):
        card = render_product_card(product(discount_percent=0))
        assert card.original_price is None

    def test_out_of_stock(self):
        card = render_product_card(product(stock=0))
        assert card.in_stock is False
        assert card.stock_notice == "Out of Stock"
        assert card.add_to_cart.enabled is False
        assert card.add_to_cart.label == "Sold Out"

    def test_in_stock(self):
        card = render_product_card(product(stock=1))
        assert card.stock_notice is None
        assert card.add_to_cart.enabled is True
        assert card.add_to_cart.label == "Add to Cart"

    def test_image_and_link(self):
        assert render_product_card(product()).image == PLACEHOLDER_IMAGE
        card = render_product_card(product(images=["https://cdn.example.com/a.png", "https://cdn.example.com/b.png"]))
        assert card.image == "https://cdn.example.com/a.png"
        assert card.href == "/products/p1"

    def test_pc_builder_mode(self):
        card = render_product_card(product(stock=0), show_add_to_cart=False, show_pc_builder=True)
        assert card.add_to_cart is None
        assert card.pc_builder_select.label == "Select"
        assert card.pc_builder_select.enabled is False


class TestProductsTable:

    def test_search_is_case_insensitive(self):
        rows = [product(id="1"), product(id="2", name="Intel Core i5", brand="Intel", sku="INT-I5")]
        lower = render_products_table(rows, {}, search="amd")
        upper = render_products_table(rows, {}, search="AMD")
        assert [r.id for r in lower.rows] == [r.id for r in upper.rows] == ["1"]

    def test_rows(self):
        table = render_products_table([product()], {"cat-cpu": "Processors"})
        row = table.rows[0]
        assert row.category == "Processors"
        assert row.price == "100.00"
        assert row.edit_href == "/admin/products/edit/p1"
        assert row.delete_href == "/admin/products/p1?confirm=true"
        assert table.delete_prompt == "Are you sure you want to delete this product?"

    def test_unknown_category(self):
        assert render_products_table([product(category_id="gone")], {}).rows[0].category == "Uncategorized"

    def test_sort_links_toggle(self):
        table = render_products_table([product()], {}, sort=SortState("price", "asc"))
        columns = {c.key: c for c in table.columns}
        assert columns["price"].sorted == "asc"
        assert columns["price"].sort_href == "/admin/products?sort_by=price&order=desc"
        assert columns["name"].sort_href == "/admin/products?sort_by=name&order=asc"
        assert columns["category"].sortable is False
        assert columns["category"].sort_href is None

    def test_sort_links_keep_search(self):
        table = render_products_table([product()], {}, search="amd")
        columns = {c.key: c for c in table.columns}
        assert columns["sku"].sort_href == "/admin/products?search=amd&sort_by=sku&order=asc"

    def test_empty(self):
        table = render_products_table([product()], {}, search="nothing")
        assert table.total == 0
        assert table.empty_message == "No products found."


class TestProductForm:

    def test_add_image_trims(self):
        assert add_image(["a"], "  https://cdn.example.com/b.png ") == ["a", "https://cdn.example.com/b.png"]

    def test_blank_image_ignored(self):
        assert add_image(["a"], "   ") == ["a"]

    def test_remove_image(self):
        assert remove_image(["a", "b", "c"], 1) == ["a", "c"]
        assert remove_image(["a"], 5) == ["a"]

    def test_apply_edit(self):
        assert apply_image_edit(ImageListEdit(images=["a", "b"], remove=0, add="c")) == ["b", "c"]

    def test_create_defaults(self):
        form = render_product_form([CategoryOut(id="cat-cpu", name="Processors", slug="cpus")])
        assert form.mode == "create"
        assert form.action == "/admin/products/new"
        assert form.values.name == ""
        assert form.values.discount_percent == 0
        assert form.categories[0].label == "Processors"

    def test_edit_values(self):
        form = render_product_form([], product(discount_percent=None, specs={"Cores": 6}))
        assert form.mode == "edit"
        assert form.method == "PUT"
        assert form.action == "/admin/products/edit/p1"
        assert form.values.sku == "AMD-R5-5600X"
        assert form.values.discount_percent == 0
        assert form.values.specs[0].key == "Cores"


class TestAdminChrome:

    def test_dashboard_cards_are_placeholders(self):
        cards = render_dashboard_cards()
        assert [c.title for c in cards] == ["Total Products", "Categories", "Orders", "Customers"]
        assert all(c.value == "0" for c in cards)

    def test_active_sidebar_item(self):
        shell = render_admin_shell("/admin/products", "Tech Haven")
        active = [item.label for item in shell.sidebar if item.active]
        assert active == ["Products"]
        assert shell.header.store_name == "Tech Haven"
        assert shell.header.view_store.href == "/"

    def test_no_active_item_for_nested_path(self):
        shell = render_admin_shell("/admin/products/new", "Tech Haven")
        assert not any(item.active for item in shell.sidebar)


class TestStorefrontPresenters:

    def test_bundle_summary_and_prices(self):
        bundle = BundleOut(id="b1", name="Combo", description="Fallback", products=["p1", "p2", "p3"],
                           total_price=300, discounted_price=270)
        view = render_bundle(bundle, {"p1": "CPU", "p2": "GPU", "p3": "RAM"})
        assert view.summary == "Includes CPU, GPU, and RAM."
        assert (view.display_price, view.original_price) == ("270.00", "300.00")

    def test_bundle_without_known_members(self):
        bundle = BundleOut(id="b1", name="Combo", description="Fallback", products=["x"],
                           total_price=10, discounted_price=10)
        view = render_bundle(bundle, {})
        assert view.summary == "Fallback"
        assert view.original_price is None

    def test_promotion_headline(self):
        promotion = PromotionOut(
            id="pr", name="Spring", code="SPRING", discount_percent=10, discount_amount=5, min_purchase=100,
            start_date=datetime(2026, 1, 1, tzinfo=timezone.utc), end_date=datetime(2026, 2, 1, tzinfo=timezone.utc),
        )
        assert render_promotion(promotion).headline == "10% off + $5.00 off on orders over $100.00"

    def test_build_total_from_current_prices(self):
        build = PCBuildOut(id="b", name="Rig", components={"cpu": "p1", "gpu": "p2", "psu": "gone"}, total_price=0)
        products = {"p1": product(id="p1", price=100), "p2": product(id="p2", price=1599.99)}
        view = render_build(build, products)
        assert view.total_price == "1699.99"
        assert [c.slot for c in view.components] == ["cpu", "gpu", "psu"]
        assert view.components[2].product is None
