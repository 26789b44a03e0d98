"""History, executive report and backup UI components.

This module provides Streamlit components for the read-only views and downloads.
"""

import pandas as pd
import streamlit as st

from core.errors import RestoreError
from core.reports import (
    executive_dataframe,
    executive_report_csv,
    executive_summary,
    history_dataframe,
    history_report_csv,
    report_filename,
)
from core.service import StockControlService

from .session_state import flash, reset_draft


def render_history(service: StockControlService):
    """Render the installation log with a per-item CSV download."""
    logs = service.logs
    if not logs:
        st.info("Aún no hay registros.")
        return

    st.metric("Registros", len(logs))
    st.dataframe(history_dataframe(logs), use_container_width=True, hide_index=True)

    st.download_button(
        label="Descargar Historial Completo (CSV)",
        data=history_report_csv(logs),
        file_name=report_filename("historial_instalaciones"),
        mime="text/csv",
        type="primary",
    )


def _ranking_chart(title: str, data: list[tuple[str, int]]):
    st.markdown(f"**{title}**")
    if data:
        st.bar_chart(pd.DataFrame(data, columns=["Nombre", "Total"]).set_index("Nombre"))


def render_executive_report(service: StockControlService):
    """Render the aggregates management looks at."""
    logs = service.logs
    summary = executive_summary(logs)

    col1, col2 = st.columns(2)
    col1.metric("Servicios", summary["installations"])
    col2.metric("Piezas utilizadas", summary["total_items"])

    _ranking_chart("Servicios por región", summary["by_region"])
    _ranking_chart("Material por región", summary["items_by_region"])
    _ranking_chart("Top técnicos", summary["top_technicians"])

    st.dataframe(executive_dataframe(logs), use_container_width=True, hide_index=True)
    st.download_button(
        label="Exportar Excel (CSV)",
        data=executive_report_csv(logs),
        file_name=report_filename("reporte_gerencial"),
        mime="text/csv",
    )


def render_backup_panel(service: StockControlService):
    """Backup download, restore and full reset."""
    st.download_button(
        label="Descargar respaldo",
        data=service.backup_json().encode("utf-8"),
        file_name=service.backup_filename(),
        mime="application/json",
        type="primary",
    )

    st.divider()
    uploaded = st.file_uploader("Restaurar respaldo", type=["json"], key="restore_file")
    if uploaded:
        st.warning("Restaurar sobrescribe todos los datos actuales.")
        if st.button("Confirmar restauración", key="restore_confirm"):
            try:
                service.restore_backup(uploaded.getvalue())
            except RestoreError as e:
                st.error(str(e))
                return
            reset_draft()
            flash("success", "Respaldo restaurado.")
            st.rerun()

    st.divider()
    confirm = st.checkbox("Entiendo que se borrarán todos los datos", key="reset_confirm")
    if st.button("Borrar todo", disabled=not confirm, key="reset_all"):
        service.reset()
        reset_draft()
        flash("info", "Datos eliminados.")
        st.rerun()
