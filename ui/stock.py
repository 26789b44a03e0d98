"""Stock table, transfer and direct-add UI components."""

import streamlit as st

from core.config import CATEGORIES, OWNER_EXECUTOR
from core.errors import StockControlError
from core.models import TransferItem
from core.reports import report_filename, stock_dataframe, stock_report_csv
from core.service import StockControlService

from .session_state import flash


def render_stock_table(service: StockControlService):
    """Render the stock table with owner filter and CSV download."""
    ledger = service.state.ledger
    summary = ledger.summary()

    col1, col2, col3 = st.columns(3)
    col1.metric("Unidades", summary["total_units"])
    col2.metric("Propietarios", summary["owners"])
    col3.metric("Líneas en cero", summary["empty_lines"])

    owners = ledger.owners()
    selected = st.multiselect("Filtrar por propietario", options=owners, default=[], key="stock_owner_filter")
    lines = [line for line in ledger if not selected or line.owner in selected]

    df = stock_dataframe(lines)
    if df.empty:
        st.info("No hay stock cargado.")
        return
    st.dataframe(df, use_container_width=True, hide_index=True)

    st.download_button(
        label="Descargar CSV",
        data=stock_report_csv(lines),
        file_name=report_filename("stock_inventario"),
        mime="text/csv",
    )


def render_transfer_form(service: StockControlService):
    """Move stock from one owner to another."""
    owners = [o for o in service.state.ledger.owners() if service.state.ledger.available_for([o])]
    if not owners:
        st.info("No hay stock disponible para transferir.")
        return

    source = st.selectbox("Origen", options=owners, key="transfer_source")
    destinations = [n for n in service.owner_choices() + [OWNER_EXECUTOR] if n != source]
    dest = st.selectbox("Destino", options=destinations, key="transfer_dest")
    if dest and service.resolve_owner(dest) != dest:
        st.info(f"El stock de {dest} se registra bajo su supervisor {service.resolve_owner(dest)}.")

    items = []
    for line in service.state.ledger.available_for([source]):
        qty = st.number_input(
            f"{line.device} / {line.model} (disp. {line.quantity})",
            min_value=0,
            max_value=line.quantity,
            value=0,
            key=f"transfer_qty_{line.id}",
        )
        if qty:
            items.append(TransferItem(line_id=line.id, quantity=int(qty)))

    if st.button("Transferir", type="primary", disabled=not items, key="transfer_submit"):
        try:
            result = service.transfer_stock(source, dest, items)
        except StockControlError as e:
            st.error(str(e))
            return
        message = f"{result.moved_lines} líneas transferidas de {source} a {dest}."
        if result.was_redirected:
            message += f" Asignadas a {result.final_destination}."
        flash("success", message)
        st.rerun()


def render_direct_add_form(service: StockControlService):
    """Register purchased or requested material for a technician."""
    technicians = service.technicians
    if not technicians:
        st.info("Carga la Lista de Técnicos primero.")
        return

    with st.form("direct_add"):
        tech = st.selectbox("Técnico", options=technicians, format_func=lambda t: t.name)
        category = st.selectbox("Categoría", options=CATEGORIES)
        device = st.text_input("Dispositivo")
        model = st.text_input("Modelo")
        quantity = st.number_input("Cantidad", min_value=1, value=1)
        submitted = st.form_submit_button("Agregar", type="primary")

    if submitted:
        try:
            service.direct_add_stock(tech.id, category, device, model, int(quantity))
        except StockControlError as e:
            st.error(str(e))
            return
        flash("success", f"{int(quantity)} x {device} agregado a {tech.name}.")
        st.rerun()
