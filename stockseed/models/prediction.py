from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stockseed.models.base import Base, TimestampMixin, UUIDMixin


class Prediction(UUIDMixin, TimestampMixin, Base):
    """Demand forecast for a product.

    Written by the forecasting side of the system; the seeder only clears it.
    """

    __tablename__ = "predictions"

    product_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("products.product_id"),
        nullable=False,
        index=True,
    )
    predicted_demand: Mapped[int] = mapped_column(Integer, nullable=False)
    prediction_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    product: Mapped["Product"] = relationship(
        "Product",
        back_populates="predictions",
    )

    def __repr__(self) -> str:
        return f"<Prediction id={self.id!r} product_id={self.product_id!r}>"
