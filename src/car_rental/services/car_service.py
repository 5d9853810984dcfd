"""Rental service: car selection and age based pricing."""

from __future__ import annotations

import random
from datetime import date
from pathlib import Path
from typing import Callable, Iterable, Optional, Protocol, Sequence

from dateutil.relativedelta import relativedelta

from car_rental.config import PT_BR, LocaleConfig
from car_rental.domain.models import Car, CarCategory, Customer, TaxRule, Transaction
from car_rental.domain.taxes import TAXES_BASED_ON_AGE, find_tax_rule
from car_rental.logging_config import get_logger
from car_rental.repositories.json_repo import CarRepo
from car_rental.services.errors import NotFoundError, ValidationError
from car_rental.utils.formatting import format_currency, format_long_date, to_cents


class RandomIndexSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class CarService:
    """Rents cars from a category and prices the rental by customer age."""

    def __init__(
        self,
        cars: Path | str | CarRepo,
        *,
        taxes: Iterable[TaxRule] = TAXES_BASED_ON_AGE,
        locale: LocaleConfig = PT_BR,
        rng: Optional[RandomIndexSource] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.car_repository = cars if isinstance(cars, CarRepo) else CarRepo(cars)
        self.taxes_based_on_age: tuple[TaxRule, ...] = tuple(taxes)
        self.locale = locale
        self._rng = rng if rng is not None else random.Random()
        self._today = today
        self._logger = get_logger(self.__class__.__name__)

    def rent(
        self,
        customer: Customer,
        car_category: CarCategory,
        number_of_days: int,
    ) -> Transaction:
        self._validate_days(number_of_days)
        car = self.get_available_car(car_category)
        final_price = self.calculate_final_price(
            customer, car_category, number_of_days
        )
        try:
            due_date = self._today() + relativedelta(days=number_of_days)
        except (OverflowError, ValueError) as exc:
            raise ValidationError(
                "A data de devolução ultrapassa o calendário suportado."
            ) from exc
        transaction = Transaction(
            customer=customer,
            car=car,
            due_date=format_long_date(due_date, self.locale),
            amount=final_price,
        )
        self._logger.info(
            "Rented car %s to customer %s for %d days (%s)",
            car.id,
            customer.id,
            number_of_days,
            final_price,
        )
        return transaction

    def calculate_final_price(
        self,
        customer: Customer,
        car_category: CarCategory,
        number_of_days: int,
    ) -> str:
        self._validate_days(number_of_days)
        rule = find_tax_rule(customer.age, self.taxes_based_on_age)
        final_price = rule.multiplier * car_category.price * number_of_days
        return format_currency(to_cents(final_price), self.locale)

    def get_available_car(self, car_category: CarCategory) -> Car:
        car_id = self.choose_random_car(car_category)
        car = self.car_repository.find(car_id)
        if car is None:
            raise NotFoundError(f"Carro {car_id} não encontrado.")
        return car

    def choose_random_car(self, car_category: CarCategory) -> str:
        if not car_category.car_ids:
            raise ValidationError(
                f"A categoria {car_category.name} não possui carros cadastrados."
            )
        index = self.get_random_position_from_array(car_category.car_ids)
        return car_category.car_ids[index]

    def get_random_position_from_array(self, items: Sequence[object]) -> int:
        """Return a uniform index in ``[0, len(items))``."""
        if not items:
            raise ValidationError("Não é possível sortear posição em lista vazia.")
        return self._rng.randrange(len(items))

    @staticmethod
    def _validate_days(number_of_days: int) -> None:
        if (
            isinstance(number_of_days, bool)
            or not isinstance(number_of_days, int)
            or number_of_days <= 0
        ):
            raise ValidationError(
                "O número de dias deve ser um inteiro positivo."
            )
