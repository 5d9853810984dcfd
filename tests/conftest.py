"""Shared fixtures for the CarRental test suite."""

import json
import logging
import sys
from pathlib import Path

import pytest

from car_rental.repositories.mappers import (
    car_category_from_record,
    car_from_record,
    customer_from_record,
)
from car_rental.services.car_service import CarService

MOCKS_DIR = Path(__file__).parent / "mocks"
DATABASE_DIR = Path(__file__).resolve().parents[1] / "database"


def _load_mock(name: str) -> dict:
    return json.loads((MOCKS_DIR / name).read_text(encoding="utf-8"))


class FixedIndex:
    """Random source that always draws the same index and counts calls."""

    def __init__(self, index: int) -> None:
        self.index = index
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.index


@pytest.fixture(autouse=True)
def isolated_app_data(tmp_path, monkeypatch):
    """Keep logs, settings and PDFs out of the real user folder."""
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))


@pytest.fixture
def valid_car():
    return car_from_record(_load_mock("valid-car.json"))


@pytest.fixture
def valid_car_category():
    return car_category_from_record(_load_mock("valid-carCategory.json"))


@pytest.fixture
def valid_customer():
    return customer_from_record(_load_mock("valid-customer.json"))


@pytest.fixture
def cars_database():
    return DATABASE_DIR / "cars.json"


@pytest.fixture
def car_service(cars_database):
    return CarService(cars_database)


@pytest.fixture
def fixed_index():
    """Factory for a random source pinned to one index."""
    return FixedIndex


@pytest.fixture
def restore_logging():
    """Undo configure_logging() changes to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    excepthook = sys.excepthook
    yield
    sys.excepthook = excepthook
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
