from typing import List, Optional
from pydantic import BaseModel, Field


class BundleBase(BaseModel):
    name: str = Field(min_length=1)
    description: str
    products: List[str] = []
    image: Optional[str] = None
    is_active: bool = True


class BundleCreate(BundleBase):
    products: List[str] = Field(min_length=1, description="Constituent product ids")
    total_price: Optional[float] = Field(default=None, ge=0, description="Sum of individual product prices")
    discounted_price: Optional[float] = Field(default=None, ge=0, description="Final bundle price after discount")


class BundleOut(BundleBase):
    id: str
    total_price: float = 0.0
    discounted_price: float = 0.0

    class Config:
        from_attributes = True
