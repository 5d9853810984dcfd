"""User settings stored as JSON next to the app data."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from car_rental.config import CAR_CATEGORY_FILENAME, CARS_FILENAME, CUSTOMER_FILENAME


@dataclass(frozen=True)
class DatabaseSettings:
    """Location of the JSON data files."""

    database_dir: str | None = None

    def resolve_dir(self, default: Path) -> Path:
        if self.database_dir:
            return Path(self.database_dir).expanduser()
        return default


@dataclass(frozen=True)
class DataFiles:
    """Paths of the three entity files inside a database folder."""

    cars: Path
    car_categories: Path
    customers: Path

    @classmethod
    def in_dir(cls, directory: Path) -> "DataFiles":
        return cls(
            cars=directory / CARS_FILENAME,
            car_categories=directory / CAR_CATEGORY_FILENAME,
            customers=directory / CUSTOMER_FILENAME,
        )


def load_config_data(config_path: Path) -> dict[str, Any]:
    """Load configuration JSON data from disk."""
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}
    if isinstance(data, dict):
        return data
    return {}


def save_config_data(config_path: Path, data: dict[str, Any]) -> None:
    """Persist configuration JSON data to disk."""
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8"
    )


def load_database_settings(config_path: Path) -> DatabaseSettings:
    data = load_config_data(config_path)
    value = data.get("database_dir")
    if isinstance(value, str) and value.strip():
        return DatabaseSettings(database_dir=value.strip())
    return DatabaseSettings()


def save_database_settings(config_path: Path, settings: DatabaseSettings) -> None:
    payload = load_config_data(config_path)
    payload["database_dir"] = settings.database_dir
    save_config_data(config_path, payload)
