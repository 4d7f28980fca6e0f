from sqlalchemy import String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from ..db import Base


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(String, unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Self-referential tree, depth unconstrained
    parent_id: Mapped[str | None] = mapped_column(String, ForeignKey("categories.id"), nullable=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
