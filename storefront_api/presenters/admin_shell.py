from ..schemas.views import AdminHeaderView, AdminShellView, LinkView

SIDEBAR_ITEMS = [
    ("Dashboard", "/admin", "layout-dashboard"),
    ("Products", "/admin/products", "package"),
    ("Categories", "/admin/categories", "tags"),
    ("PC Builds", "/admin/pc-builds", "layers"),
    ("Orders", "/admin/orders", "shopping-cart"),
    ("Promotions", "/admin/promotions", "percent-square"),
    ("Bundles", "/admin/bundles", "package-open"),
    ("Users", "/admin/users", "users"),
    ("Settings", "/admin/settings", "settings"),
]


def render_admin_shell(path: str, store_name: str) -> AdminShellView:
    """Header and sidebar; the sidebar item matching ``path`` exactly is active."""
    return AdminShellView(
        header=AdminHeaderView(
            store_name=store_name,
            view_store=LinkView(label="View Store", href="/", icon="monitor"),
        ),
        sidebar=[
            LinkView(label=title, href=href, icon=icon, active=path == href)
            for title, href, icon in SIDEBAR_ITEMS
        ],
    )
