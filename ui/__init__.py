"""UI module for Streamlit components.

This package contains all Streamlit-specific UI components.
The components are separated from business logic (in core/) to allow:
- Testing of business logic without Streamlit
- Potential future CLI or alternative UI implementations
"""

from .session_state import init_session_state, get_service, reset_draft, flash, show_flash
from .uploads import render_upload_panel, render_add_technician, describe_import
from .stock import render_stock_table, render_transfer_form, render_direct_add_form
from .installation import render_installation_form
from .results import render_history, render_executive_report, render_backup_panel

__all__ = [
    # Session state
    "init_session_state",
    "get_service",
    "reset_draft",
    "flash",
    "show_flash",
    # Uploads
    "render_upload_panel",
    "render_add_technician",
    "describe_import",
    # Stock
    "render_stock_table",
    "render_transfer_form",
    "render_direct_add_form",
    # Installation
    "render_installation_form",
    # Results
    "render_history",
    "render_executive_report",
    "render_backup_panel",
]
