from typing import Optional
from pydantic import BaseModel, Field, field_validator

from ..utils.text import SLUG_PATTERN, slugify


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1)
    slug: Optional[str] = Field(default=None, description="URL-safe unique identifier; derived from name when omitted")
    description: Optional[str] = None
    parent_id: Optional[str] = None
    image: Optional[str] = None

    @field_validator("slug")
    @classmethod
    def _slug(cls, v):
        if v is not None and not SLUG_PATTERN.fullmatch(v):
            raise ValueError("Slug may only contain lowercase letters, digits and single hyphens.")
        return v

    def resolved_slug(self) -> str:
        return self.slug or slugify(self.name)


class CategoryOut(BaseModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    parent_id: Optional[str] = None
    image: Optional[str] = None

    class Config:
        from_attributes = True
