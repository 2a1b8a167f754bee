"""CSV parsing: header row plus one mapping per data row.

Quoting is parsed in strict mode, so an unterminated quoted field or stray
characters after a closing quote raise :class:`ParseError` instead of being
silently absorbed.  Rows whose cell count differs from the header's are
rejected too.
"""

import csv
import io
import logging
from collections.abc import Iterable, Sequence

from stockseed.exceptions import ParseError, SchemaError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: tuple[str, ...] = ("product_id", "product_name", "category")

_BOM = "\ufeff"


def require_columns(header: Sequence[str], required: Iterable[str]) -> None:
    """Raise :class:`SchemaError` listing every *required* column absent from *header*."""
    present = set(header)
    missing = [column for column in required if column not in present]
    if missing:
        raise SchemaError(missing)


def parse_csv(
    text: str,
    *,
    skip_empty_lines: bool = True,
    required_columns: Iterable[str] = (),
) -> list[dict[str, str]]:
    """Parse *text* into a list of ``{header: cell}`` dicts in source order.

    Empty text yields an empty list.  When *required_columns* is given the
    header is checked before any data row is returned.  A body with no header
    row at all (empty, or blank lines only) has nothing to check, so the
    column check is skipped and a warning is logged instead.
    """
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    header: list[str] | None = None
    rows: list[dict[str, str]] = []

    try:
        for cells in reader:
            if not cells:
                if skip_empty_lines:
                    continue
                cells = [""]

            if header is None:
                header = list(cells)
                if header[0].startswith(_BOM):
                    header[0] = header[0][len(_BOM):]
                require_columns(header, required_columns)
                continue

            if len(cells) != len(header):
                raise ParseError(
                    f"Invalid record length on line {reader.line_num}: "
                    f"expected {len(header)} columns, got {len(cells)}",
                    line=reader.line_num,
                )
            rows.append(dict(zip(header, cells)))
    except csv.Error as exc:
        raise ParseError(f"Malformed CSV near line {reader.line_num}: {exc}", line=reader.line_num) from exc

    if header is None:
        logger.warning("CSV body has no header row; required columns not checked")

    logger.info("Parsed %d CSV rows", len(rows))
    return rows
