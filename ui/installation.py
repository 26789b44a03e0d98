"""Installation consumption form."""

import streamlit as st

from core.config import CLIENT_IDENTIFIER_FIELDS, USAGE_TYPES
from core.errors import StockControlError
from core.models import SelectedItem
from core.service import StockControlService

from .session_state import clear_item_widgets, flash, reset_draft

IDENTIFIER_LABELS = {
    "sctask": "SCTASK",
    "reqo": "REQO",
    "sbo": "SBO",
    "ticket": "Ticket",
}


def render_installation_form(service: StockControlService):
    """Render the form that consumes stock for an installation."""
    draft = st.session_state.draft
    technicians = service.technicians
    branches = service.branches
    if not technicians or not branches:
        st.info("Carga técnicos y sucursales para registrar instalaciones.")
        return

    if service.can_prefill:
        render_document_prefill(service)

    tech_ids = [t.id for t in technicians]
    tech_names = {t.id: t.name for t in technicians}
    draft.technician_id = st.selectbox(
        "Técnico",
        options=tech_ids,
        index=tech_ids.index(draft.technician_id) if draft.technician_id in tech_ids else 0,
        format_func=lambda i: tech_names[i],
    )

    clients = sorted({b.client for b in branches})
    drafted = service.find_branch(draft.branch_id) if draft.branch_id else None
    client = st.selectbox(
        "Cliente",
        options=clients,
        index=clients.index(drafted.client) if drafted is not None else 0,
    )
    search = st.text_input("Buscar sucursal (SIRH o nombre)").strip().lower()
    candidates = [
        b for b in branches
        if b.client == client and (not search or search in b.sirh.lower() or search in b.name.lower())
    ]
    if not candidates:
        st.warning("No hay sucursales que coincidan.")
        return
    branch_ids = [b.id for b in candidates]
    branch_labels = {b.id: f"{b.sirh} - {b.name}" for b in candidates}
    draft.branch_id = st.selectbox(
        "Sucursal",
        options=branch_ids,
        index=branch_ids.index(draft.branch_id) if draft.branch_id in branch_ids else 0,
        format_func=lambda i: branch_labels[i],
    )

    col1, col2 = st.columns(2)
    draft.report_date = col1.text_input("Fecha de reporte", value=draft.report_date)
    draft.installation_date = col2.text_input("Fecha de instalación", value=draft.installation_date)

    fields = CLIENT_IDENTIFIER_FIELDS.get(client, ())
    for name in fields:
        setattr(draft, name, st.text_input(IDENTIFIER_LABELS[name], value=getattr(draft, name)))
    draft.folio_comexa = st.text_input("Folio Comexa", value=draft.folio_comexa)

    warranty = st.radio(
        "¿Aplica garantía?",
        options=["Sí", "No"],
        index=None if draft.warranty_applied is None else (0 if draft.warranty_applied else 1),
        horizontal=True,
    )
    draft.warranty_applied = None if warranty is None else warranty == "Sí"
    draft.warranty_reason = st.text_input("Motivo", value=draft.warranty_reason)

    st.subheader("Material utilizado")
    selected = {item.stock_id: item for item in draft.items}
    items = []
    for line in service.available_stock(draft.technician_id):
        col1, col2, col3 = st.columns([3, 1, 2])
        current = selected.get(line.id)
        col1.write(f"{line.device} / {line.model} ({line.owner}, disp. {line.quantity})")
        qty = col2.number_input(
            "Cantidad",
            min_value=0,
            max_value=line.quantity,
            value=min(current.quantity, line.quantity) if current else 0,
            key=f"use_qty_{line.id}",
            label_visibility="collapsed",
        )
        usage = col3.selectbox(
            "Uso",
            options=USAGE_TYPES,
            index=USAGE_TYPES.index(current.usage_type) if current and current.usage_type in USAGE_TYPES else 0,
            key=f"use_type_{line.id}",
            label_visibility="collapsed",
        )
        if qty:
            items.append(SelectedItem(stock_id=line.id, quantity=int(qty), usage_type=usage))
    draft.items = items

    if st.button("Registrar instalación", type="primary"):
        try:
            log = service.record_installation(draft)
        except StockControlError as e:
            st.error(str(e))
            return
        reset_draft()
        flash("success", f"Instalación registrada ({log.total_items} piezas).")
        st.rerun()


def render_document_prefill(service: StockControlService):
    """Upload a scanned service report and pre-fill the form from it."""
    with st.expander("Leer reporte de servicio"):
        document = st.file_uploader(
            "Reporte (PDF o imagen)",
            type=["pdf", "png", "jpg", "jpeg"],
            key="prefill_document",
        )
        if document is None or not st.button("Autocompletar"):
            return
        with st.spinner("Leyendo reporte..."):
            try:
                filled = service.prefill_installation(
                    st.session_state.draft,
                    document.getvalue(),
                    document.type or "application/octet-stream",
                )
            except StockControlError as e:
                st.error(str(e))
                return
        st.session_state.draft = filled
        clear_item_widgets()
        flash("info", "Formulario autocompletado. Revisa los datos antes de registrar.")
        st.rerun()
