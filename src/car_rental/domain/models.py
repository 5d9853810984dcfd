"""Domain dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Customer:
    id: str
    name: str
    age: int


@dataclass(frozen=True, slots=True)
class Car:
    id: str
    name: str
    available: bool
    gas_available: bool
    release_year: int


@dataclass(frozen=True, slots=True)
class CarCategory:
    """Pricing tier grouping a set of cars under one daily price."""

    id: str
    name: str
    car_ids: tuple[str, ...]
    price: Decimal


@dataclass(frozen=True, slots=True)
class TaxRule:
    """Price multiplier applied to customers within an inclusive age range."""

    age_from: int
    age_to: int
    multiplier: Decimal

    def contains(self, age: int) -> bool:
        return self.age_from <= age <= self.age_to


@dataclass(frozen=True, slots=True)
class Transaction:
    """Receipt returned by a successful rental."""

    customer: Customer
    car: Car
    due_date: str
    amount: str
