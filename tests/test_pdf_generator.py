"""Tests for receipt PDF export."""

from decimal import Decimal

import pytest

from car_rental.domain.models import Car, CarCategory, Customer, Transaction
from car_rental.utils.pdf_generator import (
    build_receipt_filename,
    generate_receipt_pdf,
    sanitize_filename,
)


@pytest.fixture
def transaction():
    return Transaction(
        customer=Customer(id="c1", name="Natália Gomes", age=29),
        car=Car(id="car1", name="Onix", available=True, gas_available=True, release_year=2020),
        due_date="10 de novembro de 2020",
        amount="R$ 206,80",
    )


def test_generate_receipt_pdf(tmp_path, transaction):
    output = tmp_path / "nested" / "recibo.pdf"
    category = CarCategory(id="cat", name="Hatch", car_ids=("car1",), price=Decimal("37.6"))

    result = generate_receipt_pdf(transaction, output, number_of_days=5, category=category)

    assert result == output
    assert output.read_bytes().startswith(b"%PDF")


def test_generate_receipt_pdf_minimal(tmp_path, transaction):
    output = generate_receipt_pdf(transaction, tmp_path / "recibo.pdf")
    assert output.stat().st_size > 0


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Maria  Souza", "Maria_Souza"),
        ("  Ana-Clara ", "Ana-Clara"),
        ("***", "Cliente"),
    ],
)
def test_sanitize_filename(name, expected):
    assert sanitize_filename(name) == expected


def test_build_receipt_filename():
    assert build_receipt_filename("Paulo Costa") == "Paulo_Costa_Recibo.pdf"
