"""Repositories for data access."""

from car_rental.repositories.json_repo import (
    CarCategoryRepo,
    CarRepo,
    CustomerRepo,
    JsonRepository,
)
from car_rental.repositories.mappers import (
    car_category_from_record,
    car_category_to_record,
    car_from_record,
    car_to_record,
    customer_from_record,
    customer_to_record,
)

__all__ = [
    "CarCategoryRepo",
    "CarRepo",
    "CustomerRepo",
    "JsonRepository",
    "car_category_from_record",
    "car_category_to_record",
    "car_from_record",
    "car_to_record",
    "customer_from_record",
    "customer_to_record",
]
