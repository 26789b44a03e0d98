"""Parser for positional IDC/executor stock sheets."""

import re
from typing import Optional

from .config import (
    DEFAULT_MODEL,
    ROW_START_TOP,
    ROW_END_TOP,
    ROW_START_BOTTOM,
    STOCK_TOP_BLOCKS,
    STOCK_BOTTOM_BLOCKS,
)
from .models import StockLine, new_id
from .tabular import cell

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_quantity(value) -> int:
    """
    Parse a quantity cell leniently.

    Reads the leading integer ("12" -> 12, "3.7" -> 3, "4 pzas" -> 4);
    anything without one is 0.
    """
    if value is None:
        return 0
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1))


def is_device_cell(value: Optional[str]) -> bool:
    """Device cells that are blank, "0" or "nan" mark empty rows."""
    if not value:
        return False
    value = value.strip()
    return value != "" and value != "0" and value.lower() != "nan"


def extract_block(
    rows: list[list[str]],
    row_start: int,
    row_end: Optional[int],
    columns: tuple[int, int, int],
    category: str,
    owner: str,
) -> list[StockLine]:
    """
    Extract one category block from a band of rows.

    Args:
        rows: Parsed table
        row_start: First row of the band (inclusive)
        row_end: End of the band (exclusive), None for end of file
        columns: (device, model, quantity) column indices
        category: Category assigned to every line of the block
        owner: Effective owner for every emitted line

    Returns:
        One StockLine per row with a device and a positive quantity
    """
    device_col, model_col, qty_col = columns
    limit = len(rows) if row_end is None else min(row_end, len(rows))
    lines = []

    for i in range(row_start, limit):
        row = rows[i]
        if not row or len(row) < max(columns):
            continue

        device = cell(row, device_col)
        if not is_device_cell(device):
            continue

        quantity = parse_quantity(cell(row, qty_col))
        if quantity <= 0:
            continue

        lines.append(StockLine(
            id=new_id("stock"),
            category=category,
            device=device,
            model=cell(row, model_col) or DEFAULT_MODEL,
            quantity=quantity,
            owner=owner,
        ))

    return lines


def parse_stock_file(rows: list[list[str]], owner: str) -> list[StockLine]:
    """
    Parse a stock sheet into StockLines for ``owner``.

    The sheet has two bands of three side-by-side (device, model, quantity)
    blocks:
    - Top band, rows 10..37: ALARMAS (1-3), CCTV (5-7), CONTROL DE ACCESO (9-11)
    - Bottom band, rows 39..end: MISCELANEOS (1-3), CABLEADO & FLEXIBLE (5-7),
      FUENTES Y BATERIAS (9-11)

    Repeated device/model rows stay separate lines; merging is the
    ledger's job.
    """
    lines: list[StockLine] = []

    for columns, category in STOCK_TOP_BLOCKS:
        lines.extend(extract_block(rows, ROW_START_TOP, ROW_END_TOP, columns, category, owner))

    for columns, category in STOCK_BOTTOM_BLOCKS:
        lines.extend(extract_block(rows, ROW_START_BOTTOM, None, columns, category, owner))

    return lines
