from .category import Category
from .product import Product
from .pc_build import PCBuild
from .promotion import Promotion
from .bundle import Bundle

__all__ = ["Category", "Product", "PCBuild", "Promotion", "Bundle"]
