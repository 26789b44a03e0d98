"""Parser for historical service concentrate files."""

import re
from typing import Optional

from .config import (
    HISTORICAL_WARRANTY_REASON,
    NO_REGION,
    SERVICE_BRANCH_KEYWORDS,
    SERVICE_FOLIO_KEYWORDS,
    SERVICE_INSTALL_DATE_KEYWORDS,
    SERVICE_REGION_KEYWORDS,
    SERVICE_REPORT_DATE_KEYWORDS,
    SERVICE_SIRH_KEYWORDS,
    SERVICE_TECHNICIAN_KEYWORDS,
    SERVICE_TICKET_KEYWORDS,
)
from .directory_parser import clean_text
from .models import InstallationLog, new_id
from .tabular import cell, find_column

_DAY_FIRST = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{4})$")
_ISO = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def normalize_date(value: str) -> str:
    """
    Best-effort conversion to ISO dates.

    "05/03/2024" and "5-3-2024" -> "2024-03-05" (day first).
    ISO dates and anything unrecognized are returned unchanged.
    """
    if not value:
        return ""
    value = value.strip()
    if _ISO.match(value):
        return value
    match = _DAY_FIRST.match(value)
    if match:
        day, month, year = match.groups()
        return f"{year}-{int(month):02d}-{int(day):02d}"
    return value


def locate_service_columns(headers: list[str]) -> dict[str, Optional[int]]:
    """
    Map each log field to a column index by header substring.

    Fields are claimed in order so one column never feeds two fields
    (a "FOLIO SCTASK" header is the ticket, not the internal folio).
    """
    lookups = [
        ("ticket", SERVICE_TICKET_KEYWORDS),
        ("sirh", SERVICE_SIRH_KEYWORDS),
        ("folio", SERVICE_FOLIO_KEYWORDS),
        ("region", SERVICE_REGION_KEYWORDS),
        ("report_date", SERVICE_REPORT_DATE_KEYWORDS),
        ("install_date", SERVICE_INSTALL_DATE_KEYWORDS),
        ("technician", SERVICE_TECHNICIAN_KEYWORDS),
        ("branch", SERVICE_BRANCH_KEYWORDS),
    ]
    columns: dict[str, Optional[int]] = {}
    claimed: list[int] = []
    for field_name, keywords in lookups:
        idx = find_column(headers, keywords, exclude=claimed)
        columns[field_name] = idx
        if idx is not None:
            claimed.append(idx)
    return columns


def parse_service_concentrate(rows: list[list[str]]) -> tuple[list[InstallationLog], list[str]]:
    """
    Parse a service history export into InstallationLogs.

    The internal folio and branch name columns are required; without them
    the file is not recognized and no logs are produced. Rows without a
    folio are skipped. Historical logs carry no item detail.

    Returns:
        Tuple of (logs, warnings)
    """
    if not rows:
        return [], ["El archivo está vacío."]

    columns = locate_service_columns(rows[0])
    missing = [
        label for label, key in (("Folio", "folio"), ("Sucursal", "branch"))
        if columns[key] is None
    ]
    if missing:
        return [], [f"Columnas requeridas no encontradas: {', '.join(missing)}"]

    def value(row: list[str], key: str) -> str:
        idx = columns[key]
        return clean_text(cell(row, idx)) if idx is not None else ""

    logs = []
    for row in rows[1:]:
        folio = value(row, "folio")
        if not folio:
            continue

        logs.append(InstallationLog(
            id=new_id("hist"),
            sctask=value(row, "ticket"),
            folio_comexa=folio,
            technician_name=value(row, "technician").upper(),
            report_date=normalize_date(value(row, "report_date")),
            installation_date=normalize_date(value(row, "install_date")),
            branch_name=value(row, "branch"),
            branch_sirh=value(row, "sirh"),
            branch_region=value(row, "region") or NO_REGION,
            warranty_applied=False,
            warranty_reason=HISTORICAL_WARRANTY_REASON,
            items_used=(),
        ))

    return logs, []
