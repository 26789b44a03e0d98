"""Parsers for technician rosters and branch directories."""

from .config import (
    NO_REGION,
    TECHNICIAN_NAME_KEYWORDS,
    TECHNICIAN_TYPE_KEYWORDS,
)
from .models import Branch, Technician, TechnicianType
from .tabular import cell, find_column, normalize_header


def clean_text(value: str) -> str:
    """Drop stray quote characters and surrounding whitespace."""
    return value.replace('"', "").strip() if value else ""


def normalize_name(name: str) -> str:
    """Natural key for technicians: trimmed, uppercase."""
    return clean_text(name).upper()


def classify_technician(type_text: str) -> TechnicianType:
    if "EJECUTOR" in normalize_header(type_text):
        return TechnicianType.EJECUTOR
    return TechnicianType.NOMINA


def parse_technician_file(rows: list[list[str]]) -> list[Technician]:
    """
    Parse a technician roster.

    Row 0 is the header. The name column is the first header containing
    "IDC" (or, failing that, "NOMBRE"); an optional type column contains
    "TIPO", "ROL" or "CATEGORIA".

    Returns:
        Technicians in file order, or [] if no name column exists
    """
    if not rows:
        return []

    headers = rows[0]
    name_idx = find_column(headers, TECHNICIAN_NAME_KEYWORDS)
    if name_idx is None:
        return []
    type_idx = find_column(headers, TECHNICIAN_TYPE_KEYWORDS, exclude=[name_idx])

    technicians = []
    for i in range(1, len(rows)):
        row = rows[i]
        name = normalize_name(cell(row, name_idx))
        if not name:
            continue

        type_text = cell(row, type_idx) if type_idx is not None else ""
        technicians.append(Technician(
            id=f"tech-{i}",
            name=name,
            type=classify_technician(type_text),
        ))

    return technicians


def parse_branch_file(rows: list[list[str]]) -> list[Branch]:
    """
    Parse a branch directory.

    Fixed columns, row 0 skipped:
    A=client, B=SIRH, C=type, D=branch name, E=region (optional)

    Ids are ``branch-<row>``; they repeat across files, so callers merging
    several files must make them unique.
    """
    branches = []

    for i in range(1, len(rows)):
        row = rows[i]
        if len(row) < 4:
            continue
        # Trailing ",,,," rows left by spreadsheet exports
        if not any(clean_text(value) for value in row[:4]):
            continue

        region = clean_text(cell(row, 4))
        branches.append(Branch(
            id=f"branch-{i}",
            client=clean_text(row[0]),
            sirh=clean_text(row[1]),
            type=clean_text(row[2]),
            name=clean_text(row[3]),
            region=region or NO_REGION,
        ))

    return branches
