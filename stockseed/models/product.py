from typing import List, Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stockseed.models.base import Base, TimestampMixin


class Product(TimestampMixin, Base):
    __tablename__ = "products"

    product_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    inventory_records: Mapped[List["InventoryRecord"]] = relationship(
        "InventoryRecord",
        back_populates="product",
    )
    predictions: Mapped[List["Prediction"]] = relationship(
        "Prediction",
        back_populates="product",
    )

    def __repr__(self) -> str:
        return f"<Product product_id={self.product_id!r} name={self.name!r}>"
