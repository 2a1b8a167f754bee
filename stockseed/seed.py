"""Seed script: replace products and inventory with data built from the sales CSV.

Run as:
    python -m stockseed

Requires the DATABASE_URL environment variable (or a .env file).  SEED_CSV_URL,
SEED_HTTP_TIMEOUT and SEED_LOG_LEVEL are optional.

This is destructive: every inventory record, prediction and product is deleted
before the new rows are inserted.  The clear-and-insert runs in one
transaction, so a failure leaves the previous data in place.
"""

import asyncio
import logging
import random
import sys

import httpx
from pydantic import ValidationError

from stockseed.config import Settings, get_settings
from stockseed.database import database_session
from stockseed.schemas.seed import ProductSeed
from stockseed.services import (
    REQUIRED_COLUMNS,
    build_http_client,
    build_product_seeds,
    fetch_csv,
    parse_csv,
    reseed,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _report_cleared() -> None:
    print("  ✓ Cleared existing data")


def _report_inserted(seed: ProductSeed) -> None:
    print(f"  ✓ {seed.product_id}: {seed.name} (Stock: {seed.stock_level})")


async def build_seeds(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
    rng: random.Random | None = None,
) -> list[ProductSeed]:
    """Fetch, parse and deduplicate the source CSV. Touches no database state."""
    async with build_http_client(settings.seed_http_timeout, transport=transport) as client:
        text = await fetch_csv(client, settings.seed_csv_url)
    rows = parse_csv(text, required_columns=REQUIRED_COLUMNS)
    return build_product_seeds(rows, rng=rng)


async def seed_database(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
    rng: random.Random | None = None,
) -> list[ProductSeed]:
    """Run the whole pipeline once and return the seeds that were written.

    Any failure is logged with its traceback and re-raised.
    """
    print(f"{settings.app_name} Seed Script")
    print("=" * 50)

    try:
        print("\n[1/2] Building product seeds from CSV...")
        print(f"  → {settings.seed_csv_url}")
        seeds = await build_seeds(settings, transport=transport, rng=rng)
        print(f"  ✓ Found {len(seeds)} unique products")

        print("\n[2/2] Replacing products and inventory...")
        async with database_session(settings.database_url) as session_factory:
            async with session_factory() as session, session.begin():
                await reseed(
                    session,
                    seeds,
                    on_inserted=_report_inserted,
                    on_cleared=_report_cleared,
                )
    except Exception:
        logger.exception("Error during seeding")
        raise

    print("\n✓ Seed complete!")
    return seeds


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("Invalid configuration:\n%s", exc)
        return 1

    logging.basicConfig(level=settings.seed_log_level, format=LOG_FORMAT)

    try:
        asyncio.run(seed_database(settings))
    except Exception:
        # seed_database has already logged the failure
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
