from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stockseed.models.base import Base, TimestampMixin, UUIDMixin


class InventoryRecord(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "inventory_records"
    __table_args__ = (
        CheckConstraint("stock_level >= 0", name="stock_level_non_negative"),
    )

    product_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("products.product_id"),
        nullable=False,
        index=True,
    )
    stock_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    product: Mapped["Product"] = relationship(
        "Product",
        back_populates="inventory_records",
    )

    def __repr__(self) -> str:
        return (
            f"<InventoryRecord id={self.id!r} product_id={self.product_id!r} "
            f"stock_level={self.stock_level!r}>"
        )
