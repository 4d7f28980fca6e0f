from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from ..utils.dates import parse_timestamp


class PromotionCreate(BaseModel):
    name: str = Field(min_length=1)
    code: str = Field(min_length=3)
    discount_percent: float = Field(default=0, ge=0, le=100)
    discount_amount: Optional[float] = Field(default=None, ge=0)
    start_date: datetime
    end_date: datetime
    is_active: bool = True
    applies_to: List[str] = []
    min_purchase: Optional[float] = Field(default=None, ge=0)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _to_utc(cls, v):
        return parse_timestamp(v) or v

    @model_validator(mode="after")
    def _check_discount_and_range(self):
        if self.discount_percent <= 0 and not self.discount_amount:
            raise ValueError("A promotion needs a discount percent or a discount amount.")
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date.")
        return self


class PromotionOut(BaseModel):
    id: str
    name: str
    code: str
    discount_percent: float = 0.0
    discount_amount: Optional[float] = None
    start_date: datetime
    end_date: datetime
    is_active: bool = True
    applies_to: List[str] = []
    min_purchase: Optional[float] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _to_utc(cls, v):
        return parse_timestamp(v) or v

    class Config:
        from_attributes = True
