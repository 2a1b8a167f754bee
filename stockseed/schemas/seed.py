from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class CSVRow(BaseModel):
    """One data row of the source sales CSV."""

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "product_id": "P1001",
                "product_name": "Basmati Rice 5kg",
                "category": "Groceries",
                "units_sold": "42",
            }
        },
    )

    product_id: str
    product_name: str
    category: str
    # Present in the source but not used to derive stock.
    units_sold: str | None = None


class ProductSeed(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str
    category: str
    description: str
    stock_level: int
    reorder_level: int

    @field_validator("stock_level")
    @classmethod
    def stock_level_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("stock_level must be >= 0")
        return v

    @model_validator(mode="after")
    def reorder_level_is_double_stock(self) -> "ProductSeed":
        if self.reorder_level != 2 * self.stock_level:
            raise ValueError("reorder_level must be exactly twice stock_level")
        return self
