"""Data models for the stock ledger.

Records serialize to the camelCase JSON keys used by the persisted blobs,
so backups exported by earlier versions of the tool restore unchanged.
"""

import os
import uuid
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Callable, Optional

from .config import (
    DATA_DIR_ENV,
    DEFAULT_DATA_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MODEL,
    NO_REGION,
    STOCK_OVERRIDES,
    USAGE_INSTALLATION,
)


def new_id(prefix: str) -> str:
    """Opaque unique token such as ``stock-1f3a9c0b2d``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def today_iso() -> str:
    return date.today().isoformat()


class TechnicianType(str, Enum):
    NOMINA = "NOMINA"
    EJECUTOR = "EJECUTOR"


class ImportKind(str, Enum):
    """Kinds of files accepted by the upload panel."""
    STOCK = "stock"
    TECHNICIANS = "technicians"
    BRANCHES = "branches"
    SERVICES = "services"
    CATALOG = "catalog"


@dataclass
class StockLine:
    """One quantity bucket of a device/model for one owner."""
    id: str
    category: str
    device: str
    model: str
    quantity: int
    owner: str     # Technician name or OWNER_EXECUTOR

    @property
    def key(self) -> tuple[str, str, str, str]:
        """Merge key. Exact, case-sensitive comparison."""
        return (self.owner, self.device, self.model, self.category)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category,
            "device": self.device,
            "model": self.model,
            "quantity": self.quantity,
            "owner": self.owner,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StockLine":
        return cls(
            id=str(data.get("id") or new_id("stock")),
            category=data.get("category", ""),
            device=data.get("device", ""),
            model=data.get("model") or DEFAULT_MODEL,
            quantity=max(0, int(data.get("quantity", 0) or 0)),
            owner=data.get("owner", ""),
        )


@dataclass
class Technician:
    id: str
    name: str
    type: TechnicianType = TechnicianType.NOMINA

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "type": self.type.value}

    @classmethod
    def from_dict(cls, data: dict) -> "Technician":
        try:
            tech_type = TechnicianType(data.get("type", TechnicianType.NOMINA.value))
        except ValueError:
            tech_type = TechnicianType.NOMINA
        return cls(id=str(data.get("id", "")), name=data.get("name", ""), type=tech_type)


@dataclass
class Branch:
    id: str
    client: str
    sirh: str
    type: str
    name: str
    region: str = NO_REGION
    address: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "client": self.client,
            "sirh": self.sirh,
            "type": self.type,
            "name": self.name,
            "region": self.region,
            "address": self.address,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Branch":
        return cls(
            id=str(data.get("id", "")),
            client=data.get("client", ""),
            sirh=data.get("sirh", ""),
            type=data.get("type", ""),
            name=data.get("name", ""),
            region=data.get("region") or NO_REGION,
            address=data.get("address", ""),
        )


@dataclass(frozen=True)
class LogItem:
    """Snapshot of one device/model used. Holds no StockLine reference."""
    device: str
    model: str
    quantity: int
    usage_type: str = USAGE_INSTALLATION

    def to_dict(self) -> dict:
        return {
            "device": self.device,
            "model": self.model,
            "quantity": self.quantity,
            "usageType": self.usage_type,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LogItem":
        return cls(
            device=data.get("device", ""),
            model=data.get("model", ""),
            quantity=int(data.get("quantity", 0) or 0),
            usage_type=data.get("usageType", USAGE_INSTALLATION),
        )


@dataclass(frozen=True)
class InstallationLog:
    """Append-only audit record of one event that consumed or moved stock."""
    id: str
    technician_name: str
    report_date: str
    installation_date: str
    branch_name: str
    branch_sirh: str = ""
    branch_region: str = ""
    # Client identifier families (only the branch client's family is filled)
    sctask: str = ""
    reqo: str = ""
    sbo: str = ""
    ticket: str = ""
    folio_comexa: str = ""
    warranty_applied: bool = False
    warranty_reason: str = ""
    items_used: tuple[LogItem, ...] = ()

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items_used)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sctask": self.sctask,
            "reqo": self.reqo,
            "sbo": self.sbo,
            "ticket": self.ticket,
            "folioComexa": self.folio_comexa,
            "technicianName": self.technician_name,
            "reportDate": self.report_date,
            "branchName": self.branch_name,
            "branchSirh": self.branch_sirh,
            "branchRegion": self.branch_region,
            "installationDate": self.installation_date,
            "warrantyApplied": self.warranty_applied,
            "warrantyReason": self.warranty_reason,
            "itemsUsed": [item.to_dict() for item in self.items_used],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "InstallationLog":
        return cls(
            id=str(data.get("id") or new_id("log")),
            sctask=data.get("sctask") or "",
            reqo=data.get("reqo") or "",
            sbo=data.get("sbo") or "",
            ticket=data.get("ticket") or "",
            folio_comexa=data.get("folioComexa") or "",
            technician_name=data.get("technicianName", ""),
            report_date=data.get("reportDate", ""),
            installation_date=data.get("installationDate", ""),
            branch_name=data.get("branchName", ""),
            branch_sirh=data.get("branchSirh") or "",
            branch_region=data.get("branchRegion") or "",
            warranty_applied=bool(data.get("warrantyApplied", False)),
            warranty_reason=data.get("warrantyReason") or "",
            items_used=tuple(LogItem.from_dict(i) for i in data.get("itemsUsed") or []),
        )


@dataclass(frozen=True)
class CatalogItem:
    """Known device for autocomplete. Not inventory."""
    category: str
    device: str
    model: str = DEFAULT_MODEL

    def to_dict(self) -> dict:
        return {"category": self.category, "device": self.device, "model": self.model}

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogItem":
        return cls(
            category=data.get("category", ""),
            device=data.get("device", ""),
            model=data.get("model", ""),
        )


@dataclass
class TransferItem:
    """One line requested in a transfer."""
    line_id: str
    quantity: int


@dataclass
class SelectedItem:
    """One ledger line selected for an installation."""
    stock_id: str
    quantity: int
    usage_type: str = USAGE_INSTALLATION


@dataclass
class InstallationDraft:
    """Form state for an installation before it is committed.

    ``warranty_applied`` stays None until the user decides; submission
    requires an explicit True/False.
    """
    technician_id: str = ""
    branch_id: str = ""
    report_date: str = field(default_factory=today_iso)
    installation_date: str = field(default_factory=today_iso)
    sctask: str = ""
    reqo: str = ""
    sbo: str = ""
    ticket: str = ""
    folio_comexa: str = ""
    warranty_applied: Optional[bool] = None
    warranty_reason: str = ""
    items: list[SelectedItem] = field(default_factory=list)

    def copy(self) -> "InstallationDraft":
        return replace(self, items=[replace(i) for i in self.items])


@dataclass
class ImportResult:
    """Outcome of one import, for user-facing messages."""
    kind: ImportKind
    count: int
    file_count: int = 1
    owner: Optional[str] = None
    effective_owner: Optional[str] = None
    clients: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def was_redirected(self) -> bool:
        return self.owner is not None and self.owner != self.effective_owner


@dataclass
class TransferResult:
    log: InstallationLog
    destination: str
    final_destination: str
    moved_lines: int = 0
    skipped_line_ids: list[str] = field(default_factory=list)

    @property
    def was_redirected(self) -> bool:
        return self.destination != self.final_destination


@dataclass
class LedgerConfig:
    """Runtime configuration for the stock control service.

    ``oracle`` reads a scanned service report (document bytes and mime type)
    and answers with JSON text; without one, document pre-fill is disabled.
    """
    stock_overrides: dict[str, str] = field(default_factory=lambda: dict(STOCK_OVERRIDES))
    data_dir: str = DEFAULT_DATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    oracle: Optional[Callable[[bytes, str], str]] = None

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Defaults, with the data directory taken from the environment if set."""
        return cls(data_dir=os.environ.get(DATA_DIR_ENV, DEFAULT_DATA_DIR))
