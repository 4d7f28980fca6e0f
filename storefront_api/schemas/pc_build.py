from datetime import datetime
from typing import Dict, Optional
from pydantic import BaseModel, Field, field_validator


class PCBuildCreate(BaseModel):
    name: str = Field(min_length=1)
    user_id: Optional[str] = None
    components: Dict[str, str] = Field(description="Component slot name -> product id")
    is_public: bool = False

    @field_validator("components")
    @classmethod
    def _components(cls, v):
        if not v:
            raise ValueError("A build needs at least one component.")
        for slot, product_id in v.items():
            if not slot.strip() or not product_id.strip():
                raise ValueError("Component slots and product ids must be non-empty.")
        return v


class PCBuildOut(BaseModel):
    id: str
    created_at: Optional[datetime] = None
    user_id: Optional[str] = None
    name: str
    components: Dict[str, str] = {}
    total_price: float = 0.0
    is_public: bool = False

    class Config:
        from_attributes = True
