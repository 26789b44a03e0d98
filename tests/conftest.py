"""Shared fixtures for stock control tests."""

import io

import pytest
from openpyxl import Workbook
from core.models import StockLine, Technician, Branch, TechnicianType
from core.service import StockControlService
from core.storage import MemoryBlobStore

SUPERVISOR = "JULIO FERNANDO BARROSO CHAN"
JUNIOR = "MAURO ISRAEL GUTIÉRREZ HEREDIA"

# Stock sheets are 12 columns wide (A..L)
STOCK_SHEET_WIDTH = 12

ROSTER = [
    ("JUAN PEREZ", "NOMINA"),
    (SUPERVISOR, "NOMINA"),
    (JUNIOR, "NOMINA"),
    ("PEDRO RAMIREZ", "EJECUTOR EXTERNO"),
]

BRANCH_ROWS = [
    ("BANAMEX", "1001", "SUCURSAL", "CENTRO MERIDA", "SURESTE"),
    ("SANTANDER", "2002", "SUCURSAL", "PASEO MONTEJO", "SURESTE"),
    ("BANREGIO", "3003", "CAJERO", "GRAN PLAZA", ""),
]


def build_stock_rows(cells: dict, n_rows: int = 45) -> list[list[str]]:
    """Build a parsed stock sheet with values at exact (row, column) positions.

    Args:
        cells: {(row, col): value}
        n_rows: Total number of rows in the sheet

    Returns:
        Rows of STOCK_SHEET_WIDTH cells, "" everywhere else
    """
    rows = [[""] * STOCK_SHEET_WIDTH for _ in range(n_rows)]
    for (row, col), value in cells.items():
        rows[row][col] = value
    return rows


def build_stock_csv(cells: dict, n_rows: int = 45) -> str:
    """Same as build_stock_rows, rendered as CSV text."""
    return "\n".join(",".join(row) for row in build_stock_rows(cells, n_rows))


def stock_entry(row: int, first_col: int, device: str, model: str, qty) -> dict:
    """Cells for one (device, model, quantity) triple starting at ``first_col``."""
    return {
        (row, first_col): device,
        (row, first_col + 1): model,
        (row, first_col + 2): str(qty),
    }


def technician_csv(roster: list[tuple[str, str]]) -> str:
    lines = ["IDC,TIPO"]
    lines.extend(f"{name},{tech_type}" for name, tech_type in roster)
    return "\n".join(lines)


def branch_csv(rows: list[tuple]) -> str:
    lines = ["CLIENTE,SIRH,TIPO,NOMBRE,REGION"]
    lines.extend(",".join(row) for row in rows)
    return "\n".join(lines)


def build_workbook(sheets: dict) -> bytes:
    """Workbook bytes with one sheet per entry of ``sheets`` (name -> rows)."""
    wb = Workbook()
    wb.remove(wb.active)
    for name, rows in sheets.items():
        ws = wb.create_sheet(title=name)
        for row in rows:
            ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def upload(name: str, text: str) -> tuple[str, bytes]:
    """An uploaded file as the service accepts it."""
    return name, text.encode("utf-8")


def make_line(
    owner: str,
    device: str = "SENSOR PIR",
    quantity: int = 5,
    model: str = "DSC-LC100",
    category: str = "ALARMAS",
    line_id: str = None,
) -> StockLine:
    return StockLine(
        id=line_id or f"line-{owner[:4]}-{device[:4]}-{model[:4]}",
        category=category,
        device=device,
        model=model,
        quantity=quantity,
        owner=owner,
    )


def tech_id(service: StockControlService, name: str) -> str:
    for tech in service.technicians:
        if tech.name == name:
            return tech.id
    raise KeyError(name)


def branch_id(service: StockControlService, sirh: str) -> str:
    for branch in service.branches:
        if branch.sirh == sirh:
            return branch.id
    raise KeyError(sirh)


@pytest.fixture
def store():
    """Empty in-memory blob store."""
    return MemoryBlobStore()


@pytest.fixture
def service(store):
    """Service with nothing loaded."""
    return StockControlService(store)


@pytest.fixture
def loaded_service(store):
    """Service with the standard roster and branch directory loaded.

    Loaded through the persisted blobs (not the import path) so fixture ids
    are predictable.
    """
    technicians = [
        Technician(
            id=f"tech-{i}",
            name=name,
            type=TechnicianType.EJECUTOR if "EJECUTOR" in tech_type else TechnicianType.NOMINA,
        )
        for i, (name, tech_type) in enumerate(ROSTER, start=1)
    ]
    branches = [
        Branch(id=f"branch-{i}", client=c, sirh=s, type=t, name=n, region=r or "SIN REGIÓN")
        for i, (c, s, t, n, r) in enumerate(BRANCH_ROWS, start=1)
    ]
    store.save("comexa_techs", [t.to_dict() for t in technicians])
    store.save("comexa_branches", [b.to_dict() for b in branches])
    return StockControlService(store)
