"""Synthetic fixture data for the JSON database."""

from __future__ import annotations

import json
import random
import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Optional

from car_rental.config import (
    CAR_CATEGORY_FILENAME,
    CARS_FILENAME,
    CUSTOMER_FILENAME,
    ITEMS_AMOUNT,
)
from car_rental.domain.models import Car, CarCategory, Customer
from car_rental.logging_config import get_logger
from car_rental.repositories.mappers import (
    car_category_to_record,
    car_to_record,
    customer_to_record,
)

logger = get_logger(__name__)

VEHICLE_TYPES = [
    "Hatch",
    "Sedan",
    "SUV",
    "Picape",
    "Minivan",
    "Conversível",
    "Utilitário",
]

VEHICLE_MODELS = [
    "Onix",
    "HB20",
    "Gol",
    "Argo",
    "Kwid",
    "Polo",
    "Corolla",
    "Civic",
    "Compass",
    "Renegade",
    "Strada",
    "Toro",
    "Hilux",
    "Creta",
    "T-Cross",
]

FIRST_NAMES = [
    "Ana",
    "Beatriz",
    "Carla",
    "Daniela",
    "Eduardo",
    "Fernanda",
    "Gabriel",
    "Helena",
    "Igor",
    "Juliana",
    "Marcos",
    "Natália",
    "Paulo",
    "Rafael",
    "Sofia",
    "Thiago",
]

LAST_NAMES = [
    "Silva",
    "Souza",
    "Almeida",
    "Ferreira",
    "Gomes",
    "Ribeiro",
    "Carvalho",
    "Lima",
    "Pereira",
    "Costa",
]

MIN_AGE = 18
MAX_AGE = 50
MIN_PRICE = 20
MAX_PRICE = 100
RELEASE_YEARS_BACK = 10


@dataclass(frozen=True)
class SeedData:
    car_category: CarCategory
    cars: list[Car]
    customers: list[Customer]


def _random_id(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def _random_price(rng: random.Random) -> Decimal:
    cents = rng.randint(MIN_PRICE * 100, MAX_PRICE * 100)
    return Decimal(cents) / 100


def generate_seed_data(
    rng: random.Random,
    items_amount: int = ITEMS_AMOUNT,
    today: Optional[date] = None,
) -> SeedData:
    """Build one category holding ``items_amount + 1`` cars, plus as many customers."""
    if items_amount < 0:
        raise ValueError("items_amount must not be negative")
    current_year = (today or date.today()).year

    cars: list[Car] = []
    customers: list[Customer] = []
    for _ in range(items_amount + 1):
        cars.append(
            Car(
                id=_random_id(rng),
                name=rng.choice(VEHICLE_MODELS),
                available=True,
                gas_available=True,
                release_year=rng.randint(
                    current_year - RELEASE_YEARS_BACK, current_year - 1
                ),
            )
        )
        customers.append(
            Customer(
                id=_random_id(rng),
                name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
                age=rng.randint(MIN_AGE, MAX_AGE),
            )
        )

    car_category = CarCategory(
        id=_random_id(rng),
        name=rng.choice(VEHICLE_TYPES),
        car_ids=tuple(car.id for car in cars),
        price=_random_price(rng),
    )
    return SeedData(car_category=car_category, cars=cars, customers=customers)


def _write(path: Path, records: list[dict]) -> Path:
    path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
    return path


def write_seed_files(directory: Path, data: SeedData) -> list[Path]:
    """Write the three JSON files into ``directory`` and return their paths."""
    directory.mkdir(parents=True, exist_ok=True)
    written = [
        _write(
            directory / CAR_CATEGORY_FILENAME,
            [car_category_to_record(data.car_category)],
        ),
        _write(
            directory / CUSTOMER_FILENAME,
            [customer_to_record(customer) for customer in data.customers],
        ),
        _write(directory / CARS_FILENAME, [car_to_record(car) for car in data.cars]),
    ]
    logger.info(
        "Seed data written to %s (%d cars, %d customers)",
        directory,
        len(data.cars),
        len(data.customers),
    )
    return written


def seed_database(
    directory: Path,
    seed: Optional[int] = None,
    items_amount: int = ITEMS_AMOUNT,
) -> SeedData:
    rng = random.Random(seed)
    data = generate_seed_data(rng, items_amount)
    write_seed_files(directory, data)
    return data
