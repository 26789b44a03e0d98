"""Rotating file logging for the stock control tool."""

import logging
import logging.handlers
from pathlib import Path

from .config import DEFAULT_LOG_LEVEL

LOG_FILE_NAME = "stock_control.log"


def setup_logging(data_dir: str | Path, level: str = DEFAULT_LOG_LEVEL) -> Path:
    """Configure rotating file logging under <data_dir>/logs/stock_control.log"""
    log_dir = Path(data_dir).expanduser() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME

    log_level = getattr(logging, str(level).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(log_level)

    # Streamlit reruns the script on every interaction; add the handler once
    already = any(
        isinstance(h, logging.handlers.RotatingFileHandler)
        and getattr(h, "baseFilename", "").endswith(LOG_FILE_NAME)
        for h in root.handlers
    )
    if not already:
        handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=5_000_000, backupCount=3, encoding="utf-8"
        )
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
        handler.setLevel(log_level)
        root.addHandler(handler)

    return log_path
