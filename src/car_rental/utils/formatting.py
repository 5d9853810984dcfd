"""Locale aware currency and date formatting for receipts."""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from car_rental.config import PT_BR, LocaleConfig

CENTS = Decimal("0.01")


def to_cents(value: Decimal | float | int) -> Decimal:
    """Round a monetary value half-up to two decimal places."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal | float | int, locale: LocaleConfig = PT_BR) -> str:
    amount = to_cents(value)
    sign = "-" if amount < 0 else ""
    formatted = f"{abs(amount):,.2f}"
    formatted = (
        formatted.replace(",", "X")
        .replace(".", locale.decimal_separator)
        .replace("X", locale.thousands_separator)
    )
    return f"{sign}{locale.currency_symbol} {formatted}"


def format_long_date(value: date, locale: LocaleConfig = PT_BR) -> str:
    """Format a date as e.g. ``10 de novembro de 2020``."""
    return locale.long_date_pattern.format(
        day=value.day,
        month=locale.month_names[value.month - 1],
        year=value.year,
    )


def format_short_date(value: date, locale: LocaleConfig = PT_BR) -> str:
    return locale.short_date_pattern.format(
        day=value.day,
        month=value.month,
        year=value.year,
    )
