"""Uploaded file loading utilities.

This module turns uploaded files (CSV text or Excel workbooks) into plain
rows of strings for the parsers. It is UI-agnostic and can be used by both
Streamlit and CLI applications.
"""

import io
import logging
from datetime import date, datetime
from typing import BinaryIO, Union

import pandas as pd
from openpyxl import load_workbook

from .tabular import parse_csv

logger = logging.getLogger(__name__)

EXCEL_EXTENSIONS = (".xlsx", ".xlsm")

FileSource = Union[BinaryIO, bytes]


def format_cell_value(val) -> str:
    """Render a spreadsheet cell the way a CSV export would.

    Whole floats lose their ``.0`` (5.0 -> "5"), dates become ISO text,
    empty/NaN cells become "". Double quotes are dropped, matching what the
    CSV splitter does to quoted text.
    """
    if val is None:
        return ""
    if isinstance(val, float):
        if pd.isna(val):
            return ""
        if val.is_integer():
            return str(int(val))
    if isinstance(val, datetime):
        return val.date().isoformat()
    if isinstance(val, date):
        return val.isoformat()
    return str(val).replace('"', "").strip()


def is_excel_file(filename: str) -> bool:
    return filename.lower().endswith(EXCEL_EXTENSIONS)


def _read_bytes(file: FileSource) -> bytes:
    if isinstance(file, (bytes, bytearray)):
        return bytes(file)
    if hasattr(file, "seek"):
        file.seek(0)
    data = file.read()
    if hasattr(file, "seek"):
        file.seek(0)
    return data


def decode_text(data: bytes) -> str:
    """Decode CSV bytes, tolerating a BOM and legacy Windows encodings."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("cp1252", errors="replace")


def first_sheet_rows(data: bytes) -> list[list[str]]:
    """Rows of the first worksheet, blank rows included."""
    wb = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    try:
        ws = wb.worksheets[0]
        return [
            [format_cell_value(v) for v in row] if row else [""]
            for row in ws.iter_rows(values_only=True)
        ]
    finally:
        wb.close()


def load_table(
    file: FileSource,
    filename: str | None = None,
) -> tuple[list[list[str]] | None, str | None]:
    """Load an uploaded file as rows of strings.

    Args:
        file: File-like object (uploaded file or opened file) or raw bytes
        filename: Name used to detect Excel files; defaults to ``file.name``

    Returns:
        Tuple of (rows, error_message)
        If successful: (rows, None)
        If error: (None, error_message)
    """
    name = filename or getattr(file, "name", "") or ""
    try:
        data = _read_bytes(file)
        if is_excel_file(name):
            return first_sheet_rows(data), None
        return parse_csv(decode_text(data)), None
    except Exception as e:
        logger.warning("Could not read %s: %s", name or "<upload>", e)
        return None, f"Error al leer el archivo {name}: {e}"


def load_workbook_sheets(
    file: FileSource,
    filename: str | None = None,
) -> tuple[dict[str, list[list[str]]] | None, str | None]:
    """Load every sheet of a workbook as raw rows (no header handling).

    Returns:
        Tuple of (sheet_name -> rows, error_message)
    """
    name = filename or getattr(file, "name", "") or ""
    try:
        data = _read_bytes(file)
        sheets = pd.read_excel(io.BytesIO(data), sheet_name=None, header=None)
    except Exception as e:
        logger.warning("Could not read workbook %s: %s", name or "<upload>", e)
        return None, f"Error al leer el libro {name}: {e}"

    result = {}
    for sheet_name, df in sheets.items():
        result[str(sheet_name)] = [
            [format_cell_value(v) for v in row]
            for row in df.itertuples(index=False, name=None)
        ]
    return result, None
