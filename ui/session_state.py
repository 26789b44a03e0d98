"""Session state initialization and management.

This module provides functions for initializing and managing Streamlit session state.
"""

import streamlit as st

from core.logging_setup import setup_logging
from core.models import InstallationDraft, LedgerConfig
from core.service import StockControlService
from core.storage import JsonFileBlobStore


def init_session_state():
    """Initialize all session state variables with defaults."""
    if "service" not in st.session_state:
        config = LedgerConfig.from_env()
        setup_logging(config.data_dir, config.log_level)
        store = JsonFileBlobStore(config.data_dir)
        st.session_state.service = StockControlService(store, config)

    # Installation form
    if "draft" not in st.session_state:
        st.session_state.draft = InstallationDraft()

    # Owner picked for the pending stock upload
    if "pending_stock_owner" not in st.session_state:
        st.session_state.pending_stock_owner = None

    # Last operation result, shown once after a rerun
    if "flash" not in st.session_state:
        st.session_state.flash = None


def get_service() -> StockControlService:
    return st.session_state.service


def clear_item_widgets():
    """Drop per-line quantity and usage widgets so they pick up the draft again."""
    for key in list(st.session_state.keys()):
        if key.startswith(("use_qty_", "use_type_")):
            del st.session_state[key]


def reset_draft():
    """Start a fresh installation form."""
    st.session_state.draft = InstallationDraft()
    clear_item_widgets()


def flash(kind: str, message: str):
    """Queue a message for the next run.

    Args:
        kind: One of "success", "info", "warning", "error"
        message: Text to show
    """
    st.session_state.flash = (kind, message)


def show_flash():
    if st.session_state.flash:
        kind, message = st.session_state.flash
        getattr(st, kind)(message)
        st.session_state.flash = None
