"""
Pre-fill an installation draft from a scanned service report.

The extraction itself is done by an external oracle (any callable taking
the document bytes and mime type and returning text). Its answer is a
best-effort guess: fields are matched against loaded technicians,
branches and stock, and the user still confirms before committing.
"""

import json
import logging
import re
from dataclasses import replace
from typing import Callable, Optional

from .config import OWNER_EXECUTOR, STOCK_OVERRIDES, USAGE_INSTALLATION, USAGE_SUPPLY
from .errors import ExtractionError
from .models import Branch, InstallationDraft, SelectedItem, StockLine, Technician
from .ownership import resolve_owner

logger = logging.getLogger(__name__)

Oracle = Callable[[bytes, str], str]

# Category the oracle uses for consumables
SUPPLY_CATEGORY = "Material o refacción"
MIN_TOKEN_LENGTH = 4

_FENCE_START = re.compile(r"^\s*```(?:json)?\s*", re.IGNORECASE)
_FENCE_END = re.compile(r"\s*```\s*$")


def parse_oracle_response(text: str) -> dict:
    """Strip markdown code fences and parse the JSON object."""
    clean = _FENCE_END.sub("", _FENCE_START.sub("", text or "{}"))
    try:
        data = json.loads(clean or "{}")
    except json.JSONDecodeError as e:
        raise ExtractionError(f"Respuesta de extracción no es JSON válido: {e}") from e
    if not isinstance(data, dict):
        raise ExtractionError("Respuesta de extracción inesperada.")
    return data


def _text(data: dict, key: str) -> str:
    value = data.get(key)
    return str(value).strip() if value is not None else ""


def match_technician(name: str, technicians: list[Technician]) -> Optional[Technician]:
    """First technician whose name contains, or is contained in, ``name``."""
    query = name.lower()
    if not query:
        return None
    for tech in technicians:
        candidate = tech.name.lower()
        if query in candidate or candidate in query:
            return tech
    return None


def match_branch(identifier: str, branches: list[Branch]) -> Optional[Branch]:
    """First branch whose SIRH or name contains ``identifier``."""
    query = identifier.lower()
    if not query:
        return None
    for branch in branches:
        if (branch.sirh and query in branch.sirh.lower()) or (branch.name and query in branch.name.lower()):
            return branch
    return None


def match_stock_line(device_name: str, lines: list[StockLine]) -> Optional[StockLine]:
    """First line whose device contains any significant word of ``device_name``."""
    tokens = [t for t in device_name.lower().split() if len(t) >= MIN_TOKEN_LENGTH]
    for line in lines:
        device = line.device.lower()
        if any(token in device for token in tokens):
            return line
    return None


def apply_extraction(
    draft: InstallationDraft,
    data: dict,
    technicians: list[Technician],
    branches: list[Branch],
    stock: list[StockLine],
    overrides: Optional[dict[str, str]] = None,
) -> InstallationDraft:
    """
    Return a new draft with whatever the extraction could match.

    The input draft is never modified. Fields the extraction left empty
    keep their current values; matched items are added to the draft's
    items without duplicating stock lines.
    """
    result = draft.copy()

    for field_name, key in (
        ("sctask", "sctask"),
        ("reqo", "reqo"),
        ("folio_comexa", "folio_comexa"),
        ("report_date", "report_date"),
        ("installation_date", "installation_date"),
    ):
        value = _text(data, key)
        if value:
            setattr(result, field_name, value)

    tech = match_technician(_text(data, "technician_name"), technicians)
    if tech is not None:
        result.technician_id = tech.id

    branch = match_branch(_text(data, "branch_identifier"), branches)
    if branch is not None:
        result.branch_id = branch.id

    owners = {OWNER_EXECUTOR}
    if tech is not None:
        owners.add(resolve_owner(tech.name, STOCK_OVERRIDES if overrides is None else overrides))
    relevant = [line for line in stock if line.owner in owners and line.quantity > 0]

    selected = {item.stock_id for item in result.items}
    raw_items = data.get("items")
    for raw in raw_items if isinstance(raw_items, list) else []:
        if not isinstance(raw, dict):
            continue
        line = match_stock_line(_text(raw, "device_name"), relevant)
        if line is None or line.id in selected:
            continue
        try:
            wanted = int(raw.get("quantity") or 1)
        except (TypeError, ValueError):
            wanted = 1
        usage = USAGE_SUPPLY if raw.get("item_category") == SUPPLY_CATEGORY else USAGE_INSTALLATION
        result.items.append(SelectedItem(
            stock_id=line.id,
            quantity=max(1, min(wanted, line.quantity)),
            usage_type=usage,
        ))
        selected.add(line.id)

    return result


def prefill_from_document(
    draft: InstallationDraft,
    payload: bytes,
    mime_type: str,
    oracle: Oracle,
    technicians: list[Technician],
    branches: list[Branch],
    stock: list[StockLine],
    overrides: Optional[dict[str, str]] = None,
) -> InstallationDraft:
    """
    Ask the oracle about a document and pre-fill a copy of ``draft``.

    Raises:
        ExtractionError: If the oracle call fails or its answer cannot be
            read. The caller's draft is unchanged.
    """
    try:
        raw = oracle(payload, mime_type)
    except Exception as e:
        logger.warning("Document extraction failed: %s", e)
        raise ExtractionError("Hubo un error al procesar el reporte. Verifica el archivo.") from e

    data = parse_oracle_response(raw)
    filled = apply_extraction(draft, data, technicians, branches, stock, overrides)
    logger.info(
        "Pre-filled draft from document: technician=%s branch=%s items=%d",
        bool(filled.technician_id), bool(filled.branch_id), len(filled.items) - len(draft.items),
    )
    return filled
