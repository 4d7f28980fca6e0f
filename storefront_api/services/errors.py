"""
Catalog error taxonomy.

Validation problems never reach this module: pydantic rejects them before
any call to the store. What remains are store failures, told apart so the
caller can show the right message.
"""


class CatalogError(Exception):
    """Base class for failures surfaced to the user."""

    message = "Something went wrong. Please try again."

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class CatalogLoadError(CatalogError):
    message = "Failed to load products. Please try again."


class CatalogWriteError(CatalogError):
    message = "Failed to save product. Please try again."


class DuplicateSkuError(CatalogError):
    message = "A product with this SKU already exists. Please use a unique SKU."

    def __init__(self, sku: str | None = None):
        super().__init__()
        self.sku = sku


class ProductNotFoundError(CatalogError):
    message = "Product not found"

    def __init__(self, product_id: str | None = None):
        super().__init__()
        self.product_id = product_id


class CategoryNotFoundError(CatalogError):
    message = "Category not found"


class ConfirmationRequiredError(CatalogError):
    message = "Are you sure you want to delete this product?"
