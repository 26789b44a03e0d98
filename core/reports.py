"""
CSV reports and executive aggregates.

Reports are returned as UTF-8 bytes with a BOM so they open correctly in
Excel; text fields are quoted, quantities are not.
"""

import csv
from collections import Counter
from typing import Iterable

import pandas as pd

from .config import (
    EXECUTIVE_REPORT_COLUMNS,
    HISTORY_REPORT_COLUMNS,
    NO_REGION_REPORT,
    STOCK_REPORT_COLUMNS,
)
from .models import InstallationLog, StockLine, today_iso


def dataframe_to_csv_bytes(df: pd.DataFrame) -> bytes:
    text = df.to_csv(index=False, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    return ("\ufeff" + text).encode("utf-8")


def report_filename(prefix: str) -> str:
    return f"{prefix}_{today_iso()}.csv"


def stock_dataframe(lines: Iterable[StockLine]) -> pd.DataFrame:
    """Stock lines as a table, sorted by owner, category and device."""
    records = [
        [line.category, line.device, line.model, int(line.quantity), line.owner]
        for line in lines
    ]
    df = pd.DataFrame(records, columns=STOCK_REPORT_COLUMNS)
    if df.empty:
        return df
    df["Cantidad"] = df["Cantidad"].astype(int)
    return df.sort_values(["Propietario", "Categoria", "Dispositivo"], kind="stable").reset_index(drop=True)


def stock_report_csv(lines: Iterable[StockLine]) -> bytes:
    return dataframe_to_csv_bytes(stock_dataframe(lines))


def history_dataframe(logs: Iterable[InstallationLog]) -> pd.DataFrame:
    """One row per item used; logs with no items produce no rows."""
    records = []
    for log in logs:
        for item in log.items_used:
            records.append([
                log.id,
                log.report_date,
                log.installation_date,
                log.sctask,
                log.reqo,
                log.folio_comexa,
                log.technician_name,
                log.branch_name,
                log.branch_sirh,
                log.branch_region,
                item.device,
                item.model,
                int(item.quantity),
                item.usage_type,
            ])
    df = pd.DataFrame(records, columns=HISTORY_REPORT_COLUMNS)
    if not df.empty:
        df["Cantidad"] = df["Cantidad"].astype(int)
    return df


def history_report_csv(logs: Iterable[InstallationLog]) -> bytes:
    return dataframe_to_csv_bytes(history_dataframe(logs))


def executive_dataframe(logs: Iterable[InstallationLog]) -> pd.DataFrame:
    records = [
        [
            log.branch_region or "N/A",
            log.branch_name,
            log.installation_date,
            log.folio_comexa,
            log.technician_name,
            log.total_items,
        ]
        for log in logs
    ]
    df = pd.DataFrame(records, columns=EXECUTIVE_REPORT_COLUMNS)
    if not df.empty:
        df["Total Items"] = df["Total Items"].astype(int)
    return df


def executive_report_csv(logs: Iterable[InstallationLog]) -> bytes:
    return dataframe_to_csv_bytes(executive_dataframe(logs))


def _ranked(counter: Counter) -> list[tuple[str, int]]:
    # most_common keeps first-seen order among equal counts
    return counter.most_common()


def installations_by_region(logs: Iterable[InstallationLog]) -> list[tuple[str, int]]:
    """Number of logs per region, largest first."""
    return _ranked(Counter(log.branch_region or NO_REGION_REPORT for log in logs))


def items_by_region(logs: Iterable[InstallationLog]) -> list[tuple[str, int]]:
    """Total item quantity per region, largest first."""
    counter: Counter = Counter()
    for log in logs:
        counter[log.branch_region or NO_REGION_REPORT] += log.total_items
    return _ranked(counter)


def top_technicians(logs: Iterable[InstallationLog], limit: int = 5) -> list[tuple[str, int]]:
    """Technicians with the most logs."""
    return Counter(log.technician_name for log in logs).most_common(limit)


def executive_summary(logs: list[InstallationLog]) -> dict:
    return {
        "installations": len(logs),
        "total_items": sum(log.total_items for log in logs),
        "by_region": installations_by_region(logs),
        "items_by_region": items_by_region(logs),
        "top_technicians": top_technicians(logs),
    }
