"""Core module for stock ledger and file ingestion logic."""

from .models import (
    StockLine,
    Technician,
    TechnicianType,
    Branch,
    LogItem,
    InstallationLog,
    CatalogItem,
    TransferItem,
    SelectedItem,
    InstallationDraft,
    ImportKind,
    ImportResult,
    TransferResult,
    LedgerConfig,
)
from .errors import (
    StockControlError,
    PreconditionError,
    DuplicateTechnicianError,
    FormatError,
    RestoreError,
    ExtractionError,
)
from .tabular import parse_csv, parse_csv_line
from .file_loader import load_table, load_workbook_sheets
from .stock_parser import parse_stock_file
from .directory_parser import parse_technician_file, parse_branch_file
from .history_parser import parse_service_concentrate, normalize_date
from .catalog_parser import parse_catalog_workbook
from .ownership import resolve_owner
from .ledger import InventoryLedger
from .storage import BlobStore, MemoryBlobStore, JsonFileBlobStore
from .prefill import apply_extraction, parse_oracle_response, prefill_from_document
from .service import AppState, StockControlService
from .logging_setup import setup_logging

__all__ = [
    # Models
    "StockLine",
    "Technician",
    "TechnicianType",
    "Branch",
    "LogItem",
    "InstallationLog",
    "CatalogItem",
    "TransferItem",
    "SelectedItem",
    "InstallationDraft",
    "ImportKind",
    "ImportResult",
    "TransferResult",
    "LedgerConfig",
    # Errors
    "StockControlError",
    "PreconditionError",
    "DuplicateTechnicianError",
    "FormatError",
    "RestoreError",
    "ExtractionError",
    # Parsers
    "parse_csv",
    "parse_csv_line",
    "load_table",
    "load_workbook_sheets",
    "parse_stock_file",
    "parse_technician_file",
    "parse_branch_file",
    "parse_service_concentrate",
    "normalize_date",
    "parse_catalog_workbook",
    # Ledger
    "resolve_owner",
    "InventoryLedger",
    # Document pre-fill
    "parse_oracle_response",
    "apply_extraction",
    "prefill_from_document",
    # Persistence and service
    "BlobStore",
    "MemoryBlobStore",
    "JsonFileBlobStore",
    "AppState",
    "StockControlService",
    "setup_logging",
]
