"""Replace all products and inventory with freshly built seeds.

None of these functions commit.  The caller owns the transaction, so wrapping
:func:`reseed` in ``session.begin()`` makes the clear-and-insert sequence
atomic: a failure part-way through rolls back the deletes as well.
"""

import logging
from collections.abc import Callable, Sequence

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stockseed.exceptions import DatabaseError
from stockseed.models import InventoryRecord, Prediction, Product
from stockseed.schemas.seed import ProductSeed

logger = logging.getLogger(__name__)

# Children first so no row is left referencing a deleted product.
CLEAR_ORDER: tuple[type, ...] = (InventoryRecord, Prediction, Product)


async def clear_inventory(session: AsyncSession) -> None:
    """Delete every inventory record, prediction and product."""
    for model in CLEAR_ORDER:
        table = model.__tablename__
        try:
            result = await session.execute(delete(model))
        except SQLAlchemyError as exc:
            raise DatabaseError(f"delete {table}", f"Failed to clear {table}: {exc}") from exc
        logger.info("Cleared %s rows from %s", result.rowcount, table)


async def insert_seed(session: AsyncSession, seed: ProductSeed) -> None:
    """Insert the product row for *seed*, then its inventory record."""
    try:
        session.add(
            Product(
                product_id=seed.product_id,
                name=seed.name,
                category=seed.category,
                description=seed.description,
            )
        )
        await session.flush()

        session.add(
            InventoryRecord(
                product_id=seed.product_id,
                stock_level=seed.stock_level,
            )
        )
        await session.flush()
    except SQLAlchemyError as exc:
        raise DatabaseError(
            f"insert {seed.product_id}",
            f"Failed to insert product {seed.product_id}: {exc}",
        ) from exc


async def reseed(
    session: AsyncSession,
    seeds: Sequence[ProductSeed],
    on_inserted: Callable[[ProductSeed], None] | None = None,
    on_cleared: Callable[[], None] | None = None,
) -> int:
    """Clear the tables, then insert *seeds* one at a time. Returns the number inserted."""
    await clear_inventory(session)
    if on_cleared is not None:
        on_cleared()

    inserted = 0
    for seed in seeds:
        await insert_seed(session, seed)
        inserted += 1
        if on_inserted is not None:
            on_inserted(seed)

    logger.info("Inserted %d products with inventory records", inserted)
    return inserted
