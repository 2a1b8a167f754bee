from stockseed.models.inventory_record import InventoryRecord
from stockseed.models.prediction import Prediction
from stockseed.models.product import Product

__all__ = [
    "InventoryRecord",
    "Prediction",
    "Product",
]
