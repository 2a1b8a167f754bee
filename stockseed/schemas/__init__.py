from .seed import CSVRow, ProductSeed

__all__ = [
    "CSVRow",
    "ProductSeed",
]
