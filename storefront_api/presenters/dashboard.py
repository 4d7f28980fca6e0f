from typing import List

from ..schemas.views import DashboardCardView

# Placeholder metrics: values are not backed by aggregate queries yet
DASHBOARD_METRICS = [
    ("Total Products", "package", "Products in inventory"),
    ("Categories", "tags", "Product categories"),
    ("Orders", "shopping-cart", "Total orders placed"),
    ("Customers", "users", "Registered users"),
]


def render_dashboard_cards() -> List[DashboardCardView]:
    return [
        DashboardCardView(title=title, value="0", icon=icon, description=description)
        for title, icon, description in DASHBOARD_METRICS
    ]
