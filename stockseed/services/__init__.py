from stockseed.services.fetcher import build_http_client, fetch_csv
from stockseed.services.loader import clear_inventory, insert_seed, reseed
from stockseed.services.parser import REQUIRED_COLUMNS, parse_csv, require_columns
from stockseed.services.transformer import build_product_seed, build_product_seeds, describe

__all__ = [
    # fetcher
    "build_http_client",
    "fetch_csv",
    # parser
    "REQUIRED_COLUMNS",
    "parse_csv",
    "require_columns",
    # transformer
    "build_product_seed",
    "build_product_seeds",
    "describe",
    # loader
    "clear_inventory",
    "insert_seed",
    "reseed",
]
