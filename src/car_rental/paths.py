"""Filesystem paths for CarRental."""

from __future__ import annotations

import os
from pathlib import Path

from car_rental.config import (
    APP_DATA_DIRNAME,
    CONFIG_FILENAME,
    DATABASE_DIRNAME,
    LOGS_DIRNAME,
    PDF_DIRNAME,
)


def _ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_app_data_dir() -> Path:
    """Create and return the app data directory for the current user."""
    appdata = os.getenv("APPDATA")
    if appdata:
        base_dir = Path(appdata)
    else:
        base_dir = Path.home() / ".car_rental"
    return _ensure_dir(base_dir / APP_DATA_DIRNAME)


def get_config_path() -> Path:
    """Return the path to the user settings file."""
    return get_app_data_dir() / CONFIG_FILENAME


def get_database_dir() -> Path:
    """Create and return the folder holding the JSON data files."""
    return _ensure_dir(get_app_data_dir() / DATABASE_DIRNAME)


def get_logs_dir() -> Path:
    """Create and return the log directory inside the app data folder."""
    return _ensure_dir(get_app_data_dir() / LOGS_DIRNAME)


def get_pdfs_dir() -> Path:
    """Create and return the PDFs directory inside the app data folder."""
    return _ensure_dir(get_app_data_dir() / PDF_DIRNAME)
