"""Data upload UI components."""

import streamlit as st

from core.config import OWNER_EXECUTOR
from core.errors import StockControlError
from core.models import ImportKind, ImportResult, TechnicianType
from core.service import StockControlService

from .session_state import flash

UPLOAD_SECTIONS = [
    (ImportKind.TECHNICIANS, "Lista de Técnicos", ["csv", "xlsx"]),
    (ImportKind.BRANCHES, "Directorio de Sucursales", ["csv", "xlsx"]),
    (ImportKind.STOCK, "Stock de Técnico", ["csv", "xlsx"]),
    (ImportKind.SERVICES, "Concentrado de Servicios (histórico)", ["csv", "xlsx"]),
    (ImportKind.CATALOG, "Catálogo de Dispositivos", ["xlsx"]),
]


def describe_import(result: ImportResult) -> str:
    """User-facing summary of an import."""
    if result.kind is ImportKind.STOCK:
        if result.was_redirected:
            return (
                f"Stock de {result.owner} cargado ({result.count} registros). "
                f"Se asignó al inventario de su supervisor: {result.effective_owner}."
            )
        return f"Stock de {result.owner} cargado ({result.count} registros)."
    if result.kind is ImportKind.CATALOG:
        return f"Catálogo actualizado para: {', '.join(result.clients)} ({result.count} dispositivos)."
    if result.kind is ImportKind.TECHNICIANS:
        return f"{result.count} técnicos cargados."
    if result.kind is ImportKind.BRANCHES:
        return f"{result.count} sucursales cargadas."
    return f"{result.count} registros históricos importados."


def _owner_options(service: StockControlService) -> list[str]:
    return service.owner_choices() + [OWNER_EXECUTOR]


def render_upload_section(service: StockControlService, kind: ImportKind, title: str, types: list[str]):
    files = st.file_uploader(
        title,
        type=types,
        accept_multiple_files=kind is not ImportKind.CATALOG,
        key=f"upload_{kind.value}",
    )
    if not files:
        return
    if not isinstance(files, list):
        files = [files]

    owner = None
    if kind is ImportKind.STOCK:
        if not service.technicians:
            st.warning("Debes cargar la Lista de Técnicos antes de subir stock.")
            return
        owner = st.selectbox(
            "¿A quién pertenece este stock?",
            options=_owner_options(service),
            key="stock_owner_select",
        )
        resolved = service.resolve_owner(owner)
        if resolved != owner:
            st.info(f"El stock de {owner} se registra bajo {resolved}.")

    if st.button("Procesar", key=f"process_{kind.value}", type="primary"):
        try:
            result = service.import_files(kind, files, owner=owner)
        except StockControlError as e:
            st.error(str(e))
            for warning in getattr(e, "warnings", []):
                st.warning(warning)
            return
        if result.warnings:
            flash("warning", "\n\n".join([describe_import(result)] + result.warnings))
        else:
            flash("success", describe_import(result))
        st.rerun()


def render_upload_panel(service: StockControlService):
    """Render all upload sections."""
    for kind, title, types in UPLOAD_SECTIONS:
        with st.expander(title, expanded=kind is ImportKind.STOCK):
            render_upload_section(service, kind, title, types)


def render_add_technician(service: StockControlService):
    """Add a single technician without uploading a file."""
    with st.form("add_technician", clear_on_submit=True):
        name = st.text_input("Nombre del técnico")
        tech_type = st.radio("Tipo", options=list(TechnicianType), format_func=lambda t: t.value, horizontal=True)
        submitted = st.form_submit_button("Agregar técnico")

    if submitted:
        try:
            tech = service.add_technician(name, tech_type)
        except StockControlError as e:
            st.error(str(e))
            return
        flash("success", f"{tech.name} agregado.")
        st.rerun()
