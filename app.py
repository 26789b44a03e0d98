"""
Comexa Stock Control Streamlit App

Web interface for the technicians' stock ledger: file uploads, transfers,
installations, history and backups.
"""

import streamlit as st

from core.config import APP_NAME
from ui import (
    init_session_state,
    get_service,
    show_flash,
    render_upload_panel,
    render_add_technician,
    render_stock_table,
    render_transfer_form,
    render_direct_add_form,
    render_installation_form,
    render_history,
    render_executive_report,
    render_backup_panel,
)

# Page config
st.set_page_config(
    page_title=APP_NAME,
    page_icon="📦",
    layout="wide",
)

init_session_state()
service = get_service()

# Main UI
st.title(f"📦 {APP_NAME}")
show_flash()

# Sidebar with quick stats
with st.sidebar:
    st.header("Resumen")
    summary = service.state.ledger.summary()
    st.metric("Unidades en stock", summary["total_units"])
    st.metric("Técnicos", len(service.technicians))
    st.metric("Sucursales", len(service.branches))
    st.metric("Registros", len(service.logs))

tab_upload, tab_stock, tab_install, tab_history, tab_report, tab_backup = st.tabs([
    "📤 Carga de datos",
    "📋 Stock",
    "🔧 Instalación",
    "🕑 Historial",
    "📊 Reporte gerencial",
    "💾 Respaldo",
])

with tab_upload:
    st.subheader("Cargar archivos")
    render_upload_panel(service)
    st.divider()
    st.subheader("Agregar técnico")
    render_add_technician(service)

with tab_stock:
    render_stock_table(service)
    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Transferir stock")
        render_transfer_form(service)
    with col2:
        st.subheader("Ingreso directo / compra")
        render_direct_add_form(service)

with tab_install:
    st.subheader("Registrar instalación")
    render_installation_form(service)

with tab_history:
    render_history(service)

with tab_report:
    render_executive_report(service)

with tab_backup:
    render_backup_panel(service)

# Footer
st.divider()
st.caption(f"{APP_NAME} v1.0")
