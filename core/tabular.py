"""Minimal CSV splitter shared by every file parser.

Double quotes toggle a quoted section and are dropped from the output.
Doubled quotes ("") are NOT treated as an escaped quote; they simply
toggle twice. An unterminated quote swallows the rest of the line.
"""

import re
import unicodedata
from typing import Iterable, Optional

_LINE_BREAK = re.compile(r"\r?\n")


def parse_csv_line(line: str) -> list[str]:
    """Split one line on commas outside of double quotes, trimming each field."""
    result = []
    current = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            result.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    result.append("".join(current).strip())
    return result


def parse_csv(content: str) -> list[list[str]]:
    """Parse raw text into rows of cells.

    Blank lines are kept as ``[""]`` so row positions match the source file.
    """
    return [parse_csv_line(line) for line in _LINE_BREAK.split(content)]


def cell(row: list[str], index: int) -> str:
    """Cell value or "" when the row is too short."""
    if 0 <= index < len(row):
        return row[index]
    return ""


def normalize_header(text: str) -> str:
    """Uppercase header text with accents removed ("Región" -> "REGION")."""
    decomposed = unicodedata.normalize("NFKD", text or "")
    return "".join(c for c in decomposed if not unicodedata.combining(c)).upper().strip()


def find_column(
    headers: list[str],
    keywords: list[str],
    exclude: Iterable[int] = (),
) -> Optional[int]:
    """Index of the first header containing a keyword.

    Keywords are tried in order, so earlier keywords win over later ones.
    Columns listed in ``exclude`` (already claimed by another field) are
    skipped.
    """
    normalized = [normalize_header(h) for h in headers]
    excluded = set(exclude)
    for keyword in keywords:
        for idx, header in enumerate(normalized):
            if idx not in excluded and keyword in header:
                return idx
    return None
