"""Stock control service - owns the application state and every mutation.

Each mutating operation follows the same steps: read files, validate,
build a complete new state on copies, persist it, then swap it in. Any
error raised before the swap leaves memory and the store untouched.
"""

import json
import logging
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import BinaryIO, Callable, Iterable, Optional, Union

from .catalog_parser import parse_catalog_workbook
from .config import (
    ALL_IDENTIFIER_FIELDS,
    CLIENT_IDENTIFIER_FIELDS,
    DEFAULT_CATALOG_CATEGORY,
    DEFAULT_MODEL,
    DIRECT_ADD_LOG,
    NO_REGION,
    OWNER_EXECUTOR,
    STORAGE_KEYS,
    TRANSFER_LOG,
    USAGE_SUPPLY,
    USAGE_TYPES,
)
from .default_catalog import default_catalog
from .directory_parser import normalize_name, parse_branch_file, parse_technician_file
from .errors import (
    DuplicateTechnicianError,
    FormatError,
    PreconditionError,
    RestoreError,
)
from .file_loader import load_table, load_workbook_sheets
from .history_parser import normalize_date, parse_service_concentrate
from .ledger import InventoryLedger
from .models import (
    Branch,
    CatalogItem,
    ImportKind,
    ImportResult,
    InstallationDraft,
    InstallationLog,
    LedgerConfig,
    LogItem,
    StockLine,
    Technician,
    TechnicianType,
    TransferItem,
    TransferResult,
    new_id,
    today_iso,
)
from .ownership import find_override_chains, resolve_owner
from .prefill import prefill_from_document
from .stock_parser import parse_stock_file
from .storage import BlobStore

logger = logging.getLogger(__name__)

# An upload is either a file-like object with a ``name`` (Streamlit's
# UploadedFile, an opened file) or a (filename, bytes) pair.
Upload = Union[BinaryIO, tuple[str, bytes]]


@dataclass
class AppState:
    """Everything that is persisted, as one unit."""
    ledger: InventoryLedger = field(default_factory=InventoryLedger)
    technicians: list[Technician] = field(default_factory=list)
    branches: list[Branch] = field(default_factory=list)
    logs: list[InstallationLog] = field(default_factory=list)
    catalog: dict[str, list[CatalogItem]] = field(default_factory=default_catalog)

    def copy(self) -> "AppState":
        return AppState(
            ledger=self.ledger.copy(),
            technicians=[replace(t) for t in self.technicians],
            branches=[replace(b) for b in self.branches],
            logs=list(self.logs),
            catalog={client: list(items) for client, items in self.catalog.items()},
        )

    def to_blobs(self) -> dict[str, object]:
        return {
            "stock": self.ledger.to_list(),
            "technicians": [t.to_dict() for t in self.technicians],
            "branches": [b.to_dict() for b in self.branches],
            "logs": [log.to_dict() for log in self.logs],
            "catalog": {
                client: [item.to_dict() for item in items]
                for client, items in self.catalog.items()
            },
        }

    @classmethod
    def from_blobs(cls, blobs: dict[str, object]) -> "AppState":
        """Build state from raw blobs; missing (None) blobs get defaults."""
        stock = blobs.get("stock")
        technicians = blobs.get("technicians")
        branches = blobs.get("branches")
        logs = blobs.get("logs")
        catalog = blobs.get("catalog")
        return cls(
            ledger=InventoryLedger.from_list(stock or []),
            technicians=[Technician.from_dict(t) for t in technicians or []],
            branches=[Branch.from_dict(b) for b in branches or []],
            logs=[InstallationLog.from_dict(log) for log in logs or []],
            catalog=(
                {
                    client: [CatalogItem.from_dict(i) for i in items]
                    for client, items in catalog.items()
                }
                if catalog is not None
                else default_catalog()
            ),
        )


def rejected_import(message: str, warnings: Optional[list[str]] = None) -> FormatError:
    logger.warning("Import rejected: %s", message)
    return FormatError(message, warnings)


def _upload_name(upload: Upload) -> str:
    if isinstance(upload, tuple):
        return upload[0]
    return getattr(upload, "name", "") or ""


def _load_upload_table(upload: Upload) -> tuple[list[list[str]] | None, str | None]:
    if isinstance(upload, tuple):
        name, data = upload
        return load_table(data, name)
    return load_table(upload)


def disambiguate_ids(records: list, file_seq: int, used: set[str]) -> list:
    """
    Make row-derived ids unique across files.

    Each id gets ``-<file_seq>-<random5>`` appended and is re-rolled until
    it collides with nothing in ``used`` (which is updated).
    """
    result = []
    for record in records:
        while True:
            candidate = f"{record.id}-{file_seq}-{uuid.uuid4().hex[:5]}"
            if candidate not in used:
                break
        used.add(candidate)
        result.append(replace(record, id=candidate))
    return result


class StockControlService:
    """
    Coordinates imports and ledger mutations over a persisted AppState.

    Args:
        store: Blob store the state is loaded from and saved to
        config: Runtime configuration (override table, data dir)
    """

    def __init__(self, store: BlobStore, config: Optional[LedgerConfig] = None):
        self.store = store
        self.config = config or LedgerConfig()
        chains = find_override_chains(self.config.stock_overrides)
        if chains:
            logger.warning("Stock overrides contain chains (not resolved transitively): %s", chains)
        self.state = self._load()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> AppState:
        blobs = {name: self.store.load(key) for name, key in STORAGE_KEYS.items()}
        try:
            state = AppState.from_blobs(blobs)
        except (TypeError, ValueError, AttributeError) as e:
            logger.error("Persisted state is malformed, starting empty: %s", e)
            return AppState()
        logger.info(
            "Loaded %d stock lines, %d technicians, %d branches, %d logs",
            len(state.ledger), len(state.technicians), len(state.branches), len(state.logs),
        )
        return state

    def _commit(self, new_state: AppState) -> None:
        """Persist the full state, then make it current.

        If a save fails partway, the blobs already written are put back to
        the current state before the error propagates.
        """
        written = []
        try:
            for name, value in new_state.to_blobs().items():
                self.store.save(STORAGE_KEYS[name], value)
                written.append(name)
        except Exception:
            logger.error("Commit failed after saving %s, restoring previous blobs", written or "nothing")
            previous = self.state.to_blobs()
            for name in written:
                self.store.save(STORAGE_KEYS[name], previous[name])
            raise
        self.state = new_state

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def stock(self) -> list[StockLine]:
        return self.state.ledger.lines

    @property
    def technicians(self) -> list[Technician]:
        return list(self.state.technicians)

    @property
    def branches(self) -> list[Branch]:
        return list(self.state.branches)

    @property
    def logs(self) -> list[InstallationLog]:
        return list(self.state.logs)

    @property
    def catalog(self) -> dict[str, list[CatalogItem]]:
        return {client: list(items) for client, items in self.state.catalog.items()}

    def resolve_owner(self, name: str) -> str:
        return resolve_owner(name, self.config.stock_overrides)

    def find_technician(self, technician_id: str) -> Optional[Technician]:
        for tech in self.state.technicians:
            if tech.id == technician_id:
                return tech
        return None

    def find_branch(self, branch_id: str) -> Optional[Branch]:
        for branch in self.state.branches:
            if branch.id == branch_id:
                return branch
        return None

    def owner_choices(self) -> list[str]:
        """Names offered when assigning an uploaded stock file."""
        return [tech.name for tech in self.state.technicians]

    def available_stock(self, technician_id: str) -> list[StockLine]:
        """Lines a technician may consume: their effective owner's plus the executor pool."""
        tech = self.find_technician(technician_id)
        if tech is None:
            return []
        return self.state.ledger.available_for({self.resolve_owner(tech.name), OWNER_EXECUTOR})

    # ------------------------------------------------------------------
    # Imports
    # ------------------------------------------------------------------

    def import_files(
        self,
        kind: ImportKind,
        files: list[Upload],
        owner: Optional[str] = None,
    ) -> ImportResult:
        """Import uploaded files of one kind."""
        if not files:
            raise PreconditionError("No se seleccionaron archivos.")

        if kind is ImportKind.STOCK:
            if owner is None:
                raise PreconditionError("Selecciona el propietario del stock.")
            return self.import_stock(files, owner)

        handlers: dict[ImportKind, Callable[[list[Upload]], ImportResult]] = {
            ImportKind.TECHNICIANS: self.import_technicians,
            ImportKind.BRANCHES: self.import_branches,
            ImportKind.SERVICES: self.import_service_history,
            ImportKind.CATALOG: self.import_catalog,
        }
        return handlers[kind](files)

    def _read_tables(self, files: list[Upload]) -> list[list[list[str]]]:
        """Read every file before anything else happens."""
        tables = []
        for upload in files:
            rows, error = _load_upload_table(upload)
            if error:
                raise rejected_import(error)
            tables.append(rows)
        return tables

    def check_stock_import(self, owner: str) -> None:
        """Raise PreconditionError if a stock upload cannot be assigned to ``owner``."""
        if not self.state.technicians:
            raise PreconditionError(
                "Debes cargar la Lista de Técnicos antes de subir stock para poder asignar el nombre."
            )
        if not owner or not owner.strip():
            raise PreconditionError("Selecciona el propietario del stock.")
        if owner != OWNER_EXECUTOR and owner not in self.owner_choices():
            raise PreconditionError(f'"{owner}" no está en la lista de técnicos.')

    def import_stock(self, files: list[Upload], owner: str) -> ImportResult:
        """
        Replace an owner's stock with the lines read from ``files``.

        The nominal owner is resolved through the override table first; the
        effective owner's previous lines are dropped, other owners keep
        theirs.
        """
        self.check_stock_import(owner)
        effective_owner = self.resolve_owner(owner)
        tables = self._read_tables(files)

        new_lines: list[StockLine] = []
        for rows in tables:
            new_lines.extend(parse_stock_file(rows, effective_owner))

        if not new_lines:
            raise rejected_import("No se encontró stock en los archivos. Verifica el formato.")

        new_state = self.state.copy()
        removed = new_state.ledger.replace_for_owner(effective_owner, new_lines)
        self._commit(new_state)

        if effective_owner != owner:
            logger.info(
                "Stock upload for %s redirected to %s: %d lines (replaced %d)",
                owner, effective_owner, len(new_lines), removed,
            )
        else:
            logger.info("Stock upload for %s: %d lines (replaced %d)", owner, len(new_lines), removed)

        return ImportResult(
            kind=ImportKind.STOCK,
            count=len(new_lines),
            file_count=len(files),
            owner=owner,
            effective_owner=effective_owner,
        )

    def import_technicians(self, files: list[Upload]) -> ImportResult:
        """Replace the roster with the technicians of every file."""
        tables = self._read_tables(files)
        used: set[str] = set()
        technicians: list[Technician] = []
        warnings = []
        for seq, (upload, rows) in enumerate(zip(files, tables)):
            parsed = parse_technician_file(rows)
            if not parsed:
                warnings.append(f"{_upload_name(upload)}: no se encontró la columna IDC/Nombre.")
            technicians.extend(disambiguate_ids(parsed, seq, used))

        if not technicians:
            raise rejected_import("No se encontraron técnicos en los archivos.", warnings)

        new_state = self.state.copy()
        new_state.technicians = technicians
        self._commit(new_state)
        logger.info("Loaded %d technicians from %d files", len(technicians), len(files))
        return ImportResult(
            kind=ImportKind.TECHNICIANS,
            count=len(technicians),
            file_count=len(files),
            warnings=warnings,
        )

    def import_branches(self, files: list[Upload]) -> ImportResult:
        """Replace the branch directory with the branches of every file."""
        tables = self._read_tables(files)
        used: set[str] = set()
        branches: list[Branch] = []
        for seq, rows in enumerate(tables):
            branches.extend(disambiguate_ids(parse_branch_file(rows), seq, used))

        if not branches:
            raise rejected_import("No se encontraron sucursales en los archivos.")

        new_state = self.state.copy()
        new_state.branches = branches
        self._commit(new_state)
        logger.info("Loaded %d branches from %d files", len(branches), len(files))
        return ImportResult(kind=ImportKind.BRANCHES, count=len(branches), file_count=len(files))

    def import_service_history(self, files: list[Upload]) -> ImportResult:
        """Append historical service records to the log."""
        tables = self._read_tables(files)
        new_logs: list[InstallationLog] = []
        warnings = []
        for upload, rows in zip(files, tables):
            logs, file_warnings = parse_service_concentrate(rows)
            warnings.extend(f"{_upload_name(upload)}: {w}" for w in file_warnings)
            new_logs.extend(logs)

        for warning in warnings:
            logger.warning("Service history import: %s", warning)
        if not new_logs:
            raise rejected_import("No se importaron registros históricos.", warnings)

        new_state = self.state.copy()
        new_state.logs = new_state.logs + new_logs
        self._commit(new_state)
        logger.info("Imported %d historical service records", len(new_logs))
        return ImportResult(
            kind=ImportKind.SERVICES,
            count=len(new_logs),
            file_count=len(files),
            warnings=warnings,
        )

    def import_catalog(self, files: list[Upload]) -> ImportResult:
        """
        Update the device catalog from the first workbook.

        Clients found in the workbook are overwritten; other clients keep
        their current lists.
        """
        upload = files[0]
        if isinstance(upload, tuple):
            sheets, error = load_workbook_sheets(upload[1], upload[0])
        else:
            sheets, error = load_workbook_sheets(upload)
        if error:
            raise rejected_import(error)

        found = parse_catalog_workbook(sheets)
        if not found:
            raise rejected_import("Ninguna hoja del libro corresponde a un cliente conocido.")

        new_state = self.state.copy()
        new_state.catalog.update(found)
        self._commit(new_state)

        clients = list(found)
        logger.info("Catalog updated for %s", ", ".join(clients))
        return ImportResult(
            kind=ImportKind.CATALOG,
            count=sum(len(items) for items in found.values()),
            clients=clients,
        )

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def add_technician(
        self,
        name: str,
        tech_type: TechnicianType = TechnicianType.NOMINA,
    ) -> Technician:
        """Add one technician by hand; names are unique ignoring case."""
        normalized = normalize_name(name)
        if not normalized:
            raise PreconditionError("El nombre del técnico no puede estar vacío.")
        if any(t.name.upper() == normalized for t in self.state.technicians):
            raise DuplicateTechnicianError(normalized)

        tech = Technician(id=new_id("tech-manual"), name=normalized, type=tech_type)
        new_state = self.state.copy()
        new_state.technicians.append(tech)
        self._commit(new_state)
        logger.info("Added %s %s", tech_type.value, normalized)
        return tech

    # ------------------------------------------------------------------
    # Ledger mutations
    # ------------------------------------------------------------------

    def transfer_stock(
        self,
        source_owner: str,
        dest_owner: str,
        items: Iterable[TransferItem],
    ) -> TransferResult:
        """
        Move stock between owners and record one log for the whole transfer.

        The destination goes through the override table. Items whose line
        is missing or not owned by ``source_owner`` are skipped; quantities
        are capped at what the line holds.
        """
        if not source_owner or not dest_owner:
            raise PreconditionError("Selecciona origen y destino.")
        if source_owner == dest_owner:
            raise PreconditionError("El origen y el destino no pueden ser el mismo.")

        final_dest = self.resolve_owner(dest_owner)
        if source_owner == final_dest:
            raise PreconditionError(
                f"Transferencia inválida. {dest_owner} comparte inventario con {source_owner}."
            )

        new_state = self.state.copy()
        ledger = new_state.ledger
        log_items: list[LogItem] = []
        skipped: list[str] = []

        for item in items:
            line = ledger.get(item.line_id)
            if line is None or line.owner != source_owner:
                logger.warning(
                    "Transfer %s -> %s: skipping line %s (not owned by source)",
                    source_owner, dest_owner, item.line_id,
                )
                skipped.append(item.line_id)
                continue

            moved = ledger.debit(line.id, max(0, min(item.quantity, line.quantity)))
            if moved <= 0:
                continue

            ledger.credit(final_dest, line.device, line.model, line.category, moved, id_prefix="transfer")
            log_items.append(LogItem(
                device=line.device,
                model=line.model,
                quantity=moved,
                usage_type=USAGE_SUPPLY,
            ))

        today = today_iso()
        log = InstallationLog(
            id=new_id("trans-log"),
            sctask=TRANSFER_LOG["sctask"],
            reqo=TRANSFER_LOG["reqo"],
            folio_comexa=TRANSFER_LOG["folioComexa"],
            technician_name=f"{source_owner} -> {dest_owner}",
            report_date=today,
            installation_date=today,
            branch_name=TRANSFER_LOG["branchName"],
            branch_sirh=TRANSFER_LOG["branchSirh"],
            branch_region=TRANSFER_LOG["branchRegion"],
            warranty_applied=False,
            warranty_reason=TRANSFER_LOG["warrantyReason"],
            items_used=tuple(log_items),
        )
        new_state.logs = [log] + new_state.logs
        self._commit(new_state)

        if final_dest != dest_owner:
            logger.info(
                "Transfer %s -> %s redirected to supervisor %s: %d lines",
                source_owner, dest_owner, final_dest, len(log_items),
            )
        else:
            logger.info("Transfer %s -> %s: %d lines", source_owner, dest_owner, len(log_items))

        return TransferResult(
            log=log,
            destination=dest_owner,
            final_destination=final_dest,
            moved_lines=len(log_items),
            skipped_line_ids=skipped,
        )

    def direct_add_stock(
        self,
        technician_id: str,
        category: str,
        device: str,
        model: str,
        quantity: int,
    ) -> InstallationLog:
        """
        Add purchased/requested material to a technician's stock.

        Stock lands on the technician's effective owner; the log keeps the
        technician's own name.
        """
        tech = self.find_technician(technician_id)
        if tech is None:
            raise PreconditionError("Selecciona un técnico válido.")
        device = (device or "").strip()
        if not device:
            raise PreconditionError("Indica el dispositivo.")
        if quantity <= 0:
            raise PreconditionError("La cantidad debe ser mayor a cero.")

        category = (category or "").strip() or DEFAULT_CATALOG_CATEGORY
        model = (model or "").strip() or DEFAULT_MODEL
        target_owner = self.resolve_owner(tech.name)

        new_state = self.state.copy()
        new_state.ledger.credit(target_owner, device, model, category, quantity, id_prefix="direct")

        today = today_iso()
        log = InstallationLog(
            id=new_id("direct-log"),
            sctask=DIRECT_ADD_LOG["sctask"],
            reqo=DIRECT_ADD_LOG["reqo"],
            folio_comexa=DIRECT_ADD_LOG["folioComexa"],
            technician_name=tech.name,
            report_date=today,
            installation_date=today,
            branch_name=DIRECT_ADD_LOG["branchName"],
            branch_sirh=DIRECT_ADD_LOG["branchSirh"],
            branch_region=DIRECT_ADD_LOG["branchRegion"],
            warranty_applied=False,
            warranty_reason=DIRECT_ADD_LOG["warrantyReason"],
            items_used=(LogItem(device=device, model=model, quantity=quantity, usage_type=USAGE_SUPPLY),),
        )
        new_state.logs = [log] + new_state.logs
        self._commit(new_state)

        if target_owner != tech.name:
            logger.info(
                "Direct add of %d x %s/%s for %s stored under supervisor %s",
                quantity, device, model, tech.name, target_owner,
            )
        else:
            logger.info("Direct add of %d x %s/%s for %s", quantity, device, model, tech.name)
        return log

    def validate_installation(self, draft: InstallationDraft) -> tuple[Technician, Branch]:
        """Check an installation draft; raises PreconditionError on the first problem."""
        tech = self.find_technician(draft.technician_id)
        branch = self.find_branch(draft.branch_id)
        if tech is None or branch is None or not draft.items:
            raise PreconditionError(
                "Por favor completa todos los campos requeridos y selecciona al menos un dispositivo."
            )
        if draft.warranty_applied is None:
            raise PreconditionError("Indica si aplica garantía.")
        if not draft.warranty_reason or not draft.warranty_reason.strip():
            raise PreconditionError("Indica el motivo de la garantía.")

        allowed_owners = {self.resolve_owner(tech.name), OWNER_EXECUTOR}
        seen: set[str] = set()
        for item in draft.items:
            if item.stock_id in seen:
                raise PreconditionError("Un dispositivo está seleccionado dos veces.")
            seen.add(item.stock_id)

            line = self.state.ledger.get(item.stock_id)
            if line is None or line.owner not in allowed_owners or line.quantity <= 0:
                raise PreconditionError(f"El material {item.stock_id} no está disponible para {tech.name}.")
            if item.quantity < 1:
                raise PreconditionError(f"Cantidad inválida para {line.device}.")
            if item.usage_type not in USAGE_TYPES:
                raise PreconditionError(f"Tipo de uso desconocido: {item.usage_type}")

        return tech, branch

    def record_installation(self, draft: InstallationDraft) -> InstallationLog:
        """
        Consume stock for an installation and log it.

        Technician and branch details are copied into the log. Only the
        identifier fields of the branch's client are kept.
        """
        tech, branch = self.validate_installation(draft)

        new_state = self.state.copy()
        log_items = []
        for item in draft.items:
            line = new_state.ledger.get(item.stock_id)
            moved = new_state.ledger.debit(line.id, item.quantity)
            if moved < item.quantity:
                logger.warning(
                    "Installation for %s: %s/%s capped at %d (requested %d)",
                    tech.name, line.device, line.model, moved, item.quantity,
                )
            log_items.append(LogItem(
                device=line.device,
                model=line.model,
                quantity=moved,
                usage_type=item.usage_type,
            ))

        identifiers = {name: (getattr(draft, name) or "").strip() for name in ALL_IDENTIFIER_FIELDS}
        family = CLIENT_IDENTIFIER_FIELDS.get(branch.client.strip().upper())
        if family is not None:
            identifiers = {
                name: (value if name in family else "")
                for name, value in identifiers.items()
            }

        log = InstallationLog(
            id=new_id("log"),
            folio_comexa=draft.folio_comexa.strip(),
            technician_name=tech.name,
            report_date=normalize_date(draft.report_date),
            installation_date=normalize_date(draft.installation_date),
            branch_name=branch.name,
            branch_sirh=branch.sirh,
            branch_region=branch.region or NO_REGION,
            warranty_applied=bool(draft.warranty_applied),
            warranty_reason=draft.warranty_reason.strip(),
            items_used=tuple(log_items),
            **identifiers,
        )
        new_state.logs = [log] + new_state.logs
        self._commit(new_state)
        logger.info(
            "Installation by %s at %s (%s): %d items",
            tech.name, branch.name, branch.sirh, len(log_items),
        )
        return log

    # ------------------------------------------------------------------
    # Document pre-fill
    # ------------------------------------------------------------------

    @property
    def can_prefill(self) -> bool:
        return self.config.oracle is not None

    def prefill_installation(
        self, draft: InstallationDraft, payload: bytes, mime_type: str
    ) -> InstallationDraft:
        """
        Pre-fill a copy of ``draft`` from a scanned service report.

        Raises:
            PreconditionError: If no oracle is configured.
            ExtractionError: If the document could not be read. ``draft``
                is left as it was.
        """
        if self.config.oracle is None:
            raise PreconditionError("La lectura de reportes no está configurada.")
        return prefill_from_document(
            draft,
            payload,
            mime_type,
            self.config.oracle,
            self.technicians,
            self.branches,
            self.stock,
            self.config.stock_overrides,
        )

    # ------------------------------------------------------------------
    # Backup / restore
    # ------------------------------------------------------------------

    def export_backup(self) -> dict:
        """All five collections plus a timestamp, in the backup file layout."""
        blobs = self.state.to_blobs()
        return {
            "timestamp": datetime.now().isoformat(),
            "stock": blobs["stock"],
            "technicians": blobs["technicians"],
            "branches": blobs["branches"],
            "logs": blobs["logs"],
            "deviceCatalog": blobs["catalog"],
        }

    def backup_json(self) -> str:
        return json.dumps(self.export_backup(), ensure_ascii=False, indent=2)

    def backup_filename(self) -> str:
        return f"comexa_respaldo_{today_iso()}.json"

    def restore_backup(self, text: Union[str, bytes]) -> None:
        """
        Overwrite all state with a backup document.

        Raises:
            RestoreError: If the document is not valid JSON, has no ``stock``
                list, or any record cannot be read. Nothing is changed.
        """
        try:
            if isinstance(text, bytes):
                text = text.decode("utf-8-sig")
            data = json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("Backup restore failed, invalid JSON: %s", e)
            raise RestoreError("El archivo de respaldo no es JSON válido.") from e

        if not isinstance(data, dict) or not isinstance(data.get("stock"), list):
            logger.error("Backup restore failed, no stock list")
            raise RestoreError("Formato de respaldo inválido.")

        try:
            new_state = AppState.from_blobs({
                "stock": data.get("stock"),
                "technicians": data.get("technicians"),
                "branches": data.get("branches"),
                "logs": data.get("logs"),
                "catalog": data.get("deviceCatalog"),
            })
        except (TypeError, ValueError, AttributeError) as e:
            logger.error("Backup restore failed, malformed records: %s", e)
            raise RestoreError("El respaldo contiene registros dañados.") from e

        self._commit(new_state)
        logger.info("Backup restored: %d stock lines, %d logs", len(new_state.ledger), len(new_state.logs))

    def reset(self) -> None:
        """Delete everything and go back to the built-in catalog."""
        for key in STORAGE_KEYS.values():
            self.store.delete(key)
        self._commit(AppState())
        logger.info("All data reset")
