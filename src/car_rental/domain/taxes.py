"""Age based tax table."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from car_rental.domain.models import TaxRule
from car_rental.services.errors import RuleNotFoundError

TAXES_BASED_ON_AGE: tuple[TaxRule, ...] = (
    TaxRule(age_from=18, age_to=25, multiplier=Decimal("1.1")),
    TaxRule(age_from=26, age_to=30, multiplier=Decimal("1.5")),
    TaxRule(age_from=31, age_to=100, multiplier=Decimal("1.3")),
)


def find_tax_rule(age: int, rules: Iterable[TaxRule] = TAXES_BASED_ON_AGE) -> TaxRule:
    """Return the first rule whose range contains ``age``.

    There is no fallback rule: an age outside every range raises
    ``RuleNotFoundError``.
    """
    for rule in rules:
        if rule.contains(age):
            return rule
    raise RuleNotFoundError(f"Nenhuma taxa configurada para a idade {age}.")
