from datetime import datetime
from decimal import Decimal
from sqlalchemy import Integer, String, Text, DateTime, func, UniqueConstraint, CheckConstraint, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from ..db import Base, JSONType


class Product(Base):
    __tablename__ = "products"

    # SKU uniqueness is enforced by the store; the write path translates the violation
    __table_args__ = (
        UniqueConstraint('sku', name='uq_products_sku'),
        CheckConstraint('stock >= 0', name='ck_products_stock_nonnegative'),
        CheckConstraint(
            'discount_percent IS NULL OR (discount_percent >= 0 AND discount_percent <= 100)',
            name='ck_products_discount_percent_range',
        ),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    # Content
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    brand: Mapped[str] = mapped_column(String, nullable=False)
    sku: Mapped[str] = mapped_column(String, nullable=False)
    category_id: Mapped[str] = mapped_column(String, ForeignKey("categories.id"), index=True, nullable=False)
    images: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    specs: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)  # key -> scalar value
    is_featured: Mapped[bool] = mapped_column(nullable=False, default=False)

    # Pricing and inventory
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    discount_percent: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
