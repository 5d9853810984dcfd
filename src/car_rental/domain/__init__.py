"""Domain models for CarRental."""

from car_rental.domain.models import Car, CarCategory, Customer, TaxRule, Transaction
from car_rental.domain.taxes import TAXES_BASED_ON_AGE, find_tax_rule

__all__ = [
    "Car",
    "CarCategory",
    "Customer",
    "TAXES_BASED_ON_AGE",
    "TaxRule",
    "Transaction",
    "find_tax_rule",
]
