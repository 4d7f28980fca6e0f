from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Text, DateTime, func, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from ..db import Base, JSONType


class PCBuild(Base):
    __tablename__ = "pc_builds"

    id: Mapped[str] = mapped_column(String, primary_key=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    user_id: Mapped[str | None] = mapped_column(String, index=True, nullable=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    components: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)  # slot -> product id
    total_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    is_public: Mapped[bool] = mapped_column(nullable=False, default=False)
