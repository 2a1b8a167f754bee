"""Turn parsed CSV rows into one :class:`ProductSeed` per distinct product id.

The first row seen for an id wins; later rows with the same id are dropped
without merging.  Stock levels are drawn at random on every run (the
``units_sold`` column is deliberately not used), so reseeding the same CSV
twice stores different figures.
"""

import logging
import random
import secrets
from collections.abc import Iterable, Mapping

from pydantic import ValidationError

from stockseed.exceptions import SchemaError
from stockseed.schemas.seed import CSVRow, ProductSeed

logger = logging.getLogger(__name__)

# Stock levels are drawn from [0, MAX_STOCK_LEVEL).
MAX_STOCK_LEVEL = 2000
REORDER_MULTIPLIER = 2


def describe(name: str) -> str:
    return f"Autogenerated description for {name}"


def _draw_stock_level(rng: random.Random | None) -> int:
    if rng is None:
        return secrets.randbelow(MAX_STOCK_LEVEL)
    return rng.randrange(MAX_STOCK_LEVEL)


def _to_csv_row(raw: Mapping[str, str]) -> CSVRow:
    try:
        return CSVRow.model_validate(dict(raw))
    except ValidationError as exc:
        missing = [
            str(error["loc"][0])
            for error in exc.errors()
            if error["type"] == "missing" and error["loc"]
        ]
        if missing:
            raise SchemaError(missing) from exc
        raise


def build_product_seed(row: CSVRow, stock_level: int) -> ProductSeed:
    return ProductSeed(
        product_id=row.product_id,
        name=row.product_name,
        category=row.category,
        description=describe(row.product_name),
        stock_level=stock_level,
        reorder_level=REORDER_MULTIPLIER * stock_level,
    )


def build_product_seeds(
    rows: Iterable[Mapping[str, str]],
    *,
    rng: random.Random | None = None,
) -> list[ProductSeed]:
    """Deduplicate *rows* by ``product_id`` and synthesize stock figures.

    Pass *rng* to make the stock levels reproducible; by default they come
    from :mod:`secrets`.
    """
    seen: dict[str, ProductSeed] = {}
    skipped = 0

    for raw in rows:
        row = _to_csv_row(raw)
        if row.product_id in seen:
            skipped += 1
            logger.debug("Skipping duplicate row for product %s", row.product_id)
            continue
        seen[row.product_id] = build_product_seed(row, _draw_stock_level(rng))

    logger.info("Built %d product seeds (%d duplicate rows skipped)", len(seen), skipped)
    return list(seen.values())
