"""JSON record mappers for domain models."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Mapping

from car_rental.domain.models import Car, CarCategory, Customer


def _to_decimal(value: Any) -> Decimal:
    # str() first so 37.6 stays Decimal("37.6") instead of its binary expansion.
    return Decimal(str(value))


def car_from_record(record: Mapping[str, Any]) -> Car:
    return Car(
        id=str(record["id"]),
        name=record["name"],
        available=bool(record.get("available", True)),
        gas_available=bool(record.get("gasAvailable", True)),
        release_year=int(record["releaseYear"]),
    )


def car_to_record(car: Car) -> Dict[str, Any]:
    return {
        "id": car.id,
        "name": car.name,
        "available": car.available,
        "gasAvailable": car.gas_available,
        "releaseYear": car.release_year,
    }


def car_category_from_record(record: Mapping[str, Any]) -> CarCategory:
    return CarCategory(
        id=str(record["id"]),
        name=record["name"],
        car_ids=tuple(str(car_id) for car_id in record.get("carIds") or ()),
        price=_to_decimal(record["price"]),
    )


def car_category_to_record(category: CarCategory) -> Dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "carIds": list(category.car_ids),
        "price": float(category.price),
    }


def customer_from_record(record: Mapping[str, Any]) -> Customer:
    return Customer(
        id=str(record["id"]),
        name=record["name"],
        age=int(record["age"]),
    )


def customer_to_record(customer: Customer) -> Dict[str, Any]:
    return {
        "id": customer.id,
        "name": customer.name,
        "age": customer.age,
    }
