"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass

from car_rental.version import __app_name__, __company__

APP_NAME = __app_name__
APP_DATA_DIRNAME = "CarRental"
DATABASE_DIRNAME = "database"
CARS_FILENAME = "cars.json"
CAR_CATEGORY_FILENAME = "carCategory.json"
CUSTOMER_FILENAME = "customer.json"
LOGS_DIRNAME = "logs"
LOG_FILENAME = "app.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3
PDF_DIRNAME = "pdfs"
CONFIG_FILENAME = "config.json"

DEFAULT_SEED = 42
ITEMS_AMOUNT = 2


@dataclass(frozen=True)
class LocaleConfig:
    """Currency and date conventions used on receipts."""

    currency_symbol: str
    decimal_separator: str
    thousands_separator: str
    month_names: tuple[str, ...]
    long_date_pattern: str
    short_date_pattern: str


PT_BR = LocaleConfig(
    currency_symbol="R$",
    decimal_separator=",",
    thousands_separator=".",
    month_names=(
        "janeiro",
        "fevereiro",
        "março",
        "abril",
        "maio",
        "junho",
        "julho",
        "agosto",
        "setembro",
        "outubro",
        "novembro",
        "dezembro",
    ),
    long_date_pattern="{day} de {month} de {year}",
    short_date_pattern="{day:02d}/{month:02d}/{year}",
)


@dataclass(frozen=True)
class PdfIssuerInfo:
    """Issuer information for rental receipts."""

    name: str
    phone: str
    document: str
    address: str


PDF_ISSUER = PdfIssuerInfo(
    name="Locadora Demo",
    phone="(11) 99999-9999",
    document="CNPJ 00.000.000/0001-00",
    address="Rua Exemplo, 123 - Centro",
)


@dataclass(frozen=True)
class AppConfig:
    """Static configuration values for CarRental."""

    app_name: str = APP_NAME
    organization_name: str = __company__
    locale: LocaleConfig = PT_BR
