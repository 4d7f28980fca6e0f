from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field, condecimal, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator, model_validator

# Specification values are flat scalars; nested objects and lists are rejected
SpecValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]

# Match the Numeric(10, 2) and Numeric(5, 2) columns; NaN and infinity are rejected
Price = condecimal(max_digits=10, decimal_places=2)
Percent = condecimal(max_digits=5, decimal_places=2)


class SpecEntry(BaseModel):
    key: str = Field(min_length=1, description="Specification name, e.g. 'Cores'")
    value: SpecValue


def _normalize_specs(raw):
    """Accept a mapping or a list of entries; keep insertion order."""
    if raw is None:
        return []
    if isinstance(raw, dict):
        return [{"key": k, "value": v} for k, v in raw.items()]
    return raw


def _check_unique_keys(entries: List[SpecEntry]) -> List[SpecEntry]:
    seen = set()
    for entry in entries:
        if entry.key in seen:
            raise ValueError(f"Duplicate specification key: {entry.key}")
        seen.add(entry.key)
    return entries


def specs_to_mapping(entries: List[SpecEntry]) -> dict:
    return {entry.key: entry.value for entry in entries}


class ProductRules(BaseModel):
    """Form rules shared by create and update payloads.

    Every check runs before any call to the store. ``None`` means "not
    supplied" and is left to the concrete model to allow or reject.
    """

    @field_validator("name", check_fields=False)
    @classmethod
    def _name(cls, v):
        if v is not None and len(v) < 3:
            raise ValueError("Product name must be at least 3 characters.")
        return v

    @field_validator("description", check_fields=False)
    @classmethod
    def _description(cls, v):
        if v is not None and len(v) < 10:
            raise ValueError("Description must be at least 10 characters.")
        return v

    @field_validator("price", check_fields=False)
    @classmethod
    def _price(cls, v):
        if v is not None and v <= 0:
            raise ValueError("Price must be a positive number.")
        return v

    @field_validator("category_id", check_fields=False)
    @classmethod
    def _category(cls, v):
        if v is not None and len(v) < 1:
            raise ValueError("Please select a category.")
        return v

    @field_validator("stock", check_fields=False)
    @classmethod
    def _stock(cls, v):
        if v is not None and v < 0:
            raise ValueError("Stock must be a non-negative integer.")
        return v

    @field_validator("brand", check_fields=False)
    @classmethod
    def _brand(cls, v):
        if v is not None and len(v) < 1:
            raise ValueError("Brand is required.")
        return v

    @field_validator("sku", check_fields=False)
    @classmethod
    def _sku(cls, v):
        if v is not None and len(v) < 3:
            raise ValueError("SKU must be at least 3 characters.")
        return v

    @field_validator("discount_percent", check_fields=False)
    @classmethod
    def _discount(cls, v):
        if v is not None and not 0 <= v <= 100:
            raise ValueError("Discount must be between 0 and 100.")
        return v

    @field_validator("specs", mode="before", check_fields=False)
    @classmethod
    def _specs_in(cls, v):
        return _normalize_specs(v)

    @field_validator("specs", check_fields=False)
    @classmethod
    def _specs_unique(cls, v):
        return _check_unique_keys(v) if v is not None else v


class ProductCreate(ProductRules):
    name: str
    description: str
    price: Price
    category_id: str
    stock: int
    brand: str
    sku: str
    is_featured: bool = False
    discount_percent: Optional[Percent] = 0
    images: List[StrictStr] = []
    specs: List[SpecEntry] = []


class ProductUpdate(ProductRules):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Price] = None
    category_id: Optional[str] = None
    stock: Optional[int] = None
    brand: Optional[str] = None
    sku: Optional[str] = None
    is_featured: Optional[bool] = None
    discount_percent: Optional[Percent] = None
    images: Optional[List[StrictStr]] = None
    specs: Optional[List[SpecEntry]] = None

    @model_validator(mode="after")
    def _no_null_required_fields(self):
        # discount_percent is the only nullable column
        for field in self.model_fields_set:
            if field != "discount_percent" and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class ProductOut(BaseModel):
    id: str
    created_at: Optional[datetime] = None
    name: str
    description: str
    price: float
    category_id: str
    stock: int
    brand: str
    sku: str
    is_featured: bool = False
    discount_percent: Optional[float] = None
    images: List[str] = []
    specs: List[SpecEntry] = []

    @field_validator("specs", mode="before")
    @classmethod
    def _specs_out(cls, v):
        return _normalize_specs(v)

    class Config:
        from_attributes = True
