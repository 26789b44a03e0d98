"""Parser for multi-sheet device catalog workbooks."""

from typing import Optional

from .config import (
    CATALOG_HEADER_KEYWORDS,
    CLIENTS,
    DEFAULT_CATALOG_CATEGORY,
    DEFAULT_MODEL,
)
from .directory_parser import clean_text
from .models import CatalogItem
from .tabular import cell, normalize_header


def detect_client(sheet_name: str, clients: list[str] = CLIENTS) -> Optional[str]:
    """Client token contained in the sheet name (case-insensitive), if any."""
    upper = normalize_header(sheet_name)
    for client in clients:
        if client in upper:
            return client
    return None


def looks_like_header(row: list[str]) -> bool:
    for value in (cell(row, 0), cell(row, 1)):
        text = normalize_header(value)
        if any(keyword in text for keyword in CATALOG_HEADER_KEYWORDS):
            return True
    return False


def parse_catalog_sheet(rows: list[list[str]]) -> list[CatalogItem]:
    """
    Read (category, device, model) triples from columns A-C.

    A header row is skipped when its first or second cell mentions
    "TIPO" or "DISPOSITIVO". Rows without a device are ignored.
    """
    start = 1 if rows and looks_like_header(rows[0]) else 0
    items = []
    for row in rows[start:]:
        device = clean_text(cell(row, 1))
        if not device:
            continue
        items.append(CatalogItem(
            category=clean_text(cell(row, 0)) or DEFAULT_CATALOG_CATEGORY,
            device=device,
            model=clean_text(cell(row, 2)) or DEFAULT_MODEL,
        ))
    return items


def parse_catalog_workbook(sheets: dict[str, list[list[str]]]) -> dict[str, list[CatalogItem]]:
    """
    Build a per-client catalog from every relevant sheet.

    Sheets whose name contains no client token are ignored. Several sheets
    of the same client are concatenated. Clients without items are left
    out of the result.
    """
    catalog: dict[str, list[CatalogItem]] = {}
    for sheet_name, rows in sheets.items():
        client = detect_client(sheet_name)
        if client is None:
            continue
        items = parse_catalog_sheet(rows)
        if items:
            catalog.setdefault(client, []).extend(items)
    return catalog
