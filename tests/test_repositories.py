"""Tests for the JSON backed repositories."""

import json
from decimal import Decimal

import pytest

from car_rental.domain.models import Car, CarCategory, Customer
from car_rental.repositories import (
    CarCategoryRepo,
    CarRepo,
    CustomerRepo,
    car_category_from_record,
    car_category_to_record,
    car_to_record,
)
from car_rental.services.errors import RepositoryError


@pytest.fixture
def cars_file(tmp_path):
    path = tmp_path / "cars.json"
    path.write_text(
        json.dumps(
            [
                {"id": "a", "name": "Gol", "available": True, "gasAvailable": False, "releaseYear": 2015},
                {"id": "b", "name": "Kwid", "available": False, "gasAvailable": True, "releaseYear": 2020},
                {"id": "a", "name": "Duplicado", "available": True, "gasAvailable": True, "releaseYear": 2010},
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestJsonRepository:
    """Test lookups over JSON files."""

    def test_find_returns_mapped_record(self, cars_file):
        repo = CarRepo(cars_file)

        car = repo.find("b")

        assert car == Car(id="b", name="Kwid", available=False, gas_available=True, release_year=2020)

    def test_find_first_match_wins(self, cars_file):
        assert CarRepo(cars_file).find("a").name == "Gol"

    def test_find_missing_returns_none(self, cars_file):
        assert CarRepo(cars_file).find("zzz") is None

    def test_list_all_keeps_file_order(self, cars_file):
        names = [car.name for car in CarRepo(cars_file).list_all()]
        assert names == ["Gol", "Kwid", "Duplicado"]

    def test_file_read_once(self, cars_file):
        repo = CarRepo(cars_file)
        repo.find("a")
        cars_file.write_text("[]", encoding="utf-8")

        assert repo.find("b") is not None

    def test_file_not_read_on_construction(self, tmp_path):
        repo = CarRepo(tmp_path / "later.json")
        (tmp_path / "later.json").write_text("[]", encoding="utf-8")

        assert repo.list_all() == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(RepositoryError, match="não encontrado"):
            CarRepo(tmp_path / "nope.json").find("a")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RepositoryError):
            CarRepo(path).find("a")

    def test_json_object_rejected(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text('{"id": "a"}', encoding="utf-8")
        with pytest.raises(RepositoryError, match="Formato inválido"):
            CarRepo(path).list_all()

    def test_non_object_elements_rejected(self, tmp_path):
        path = tmp_path / "numbers.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(RepositoryError, match="Formato inválido"):
            CarRepo(path).find("a")

    def test_record_missing_field(self, tmp_path):
        path = tmp_path / "cars.json"
        path.write_text('[{"id": "a", "name": "Gol"}]', encoding="utf-8")
        repo = CarRepo(path)

        with pytest.raises(RepositoryError, match="Registro inválido"):
            repo.find("a")
        with pytest.raises(RepositoryError):
            repo.list_all()

    def test_record_with_bad_price(self, tmp_path):
        path = tmp_path / "carCategory.json"
        path.write_text(
            '[{"id": "c", "name": "SUV", "carIds": [], "price": "abc"}]',
            encoding="utf-8",
        )
        with pytest.raises(RepositoryError, match="Registro inválido"):
            CarCategoryRepo(path).find("c")

    def test_bad_record_not_touched_by_other_lookups(self, tmp_path):
        path = tmp_path / "customer.json"
        path.write_text(
            '[{"id": "ok", "name": "Ana", "age": 30}, {"id": "bad", "name": "Igor"}]',
            encoding="utf-8",
        )
        assert CustomerRepo(path).find("ok").age == 30


class TestTypedRepositories:
    """Test the sample database through each typed repository."""

    def test_customer_repo(self, cars_database):
        repo = CustomerRepo(cars_database.parent / "customer.json")
        customer = repo.find("a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d")
        assert customer == Customer(
            id="a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d",
            name="Juliana Ribeiro",
            age=20,
        )

    def test_category_repo(self, cars_database):
        repo = CarCategoryRepo(cars_database.parent / "carCategory.json")
        category = repo.list_all()[0]
        assert isinstance(category, CarCategory)
        assert category.price == Decimal("37.6")
        assert len(category.car_ids) == 3
        cars = CarRepo(cars_database)
        assert all(cars.find(car_id) is not None for car_id in category.car_ids)


class TestMappers:
    """Test record conversion."""

    def test_price_parsed_as_exact_decimal(self):
        category = car_category_from_record(
            {"id": "x", "name": "SUV", "carIds": ["1", "2"], "price": 37.6}
        )
        assert category.price == Decimal("37.6")
        assert category.car_ids == ("1", "2")

    def test_price_accepts_string(self):
        category = car_category_from_record(
            {"id": "x", "name": "SUV", "carIds": [], "price": "45.10"}
        )
        assert category.price == Decimal("45.10")

    def test_car_record_uses_camel_case(self):
        car = Car(id="1", name="Onix", available=True, gas_available=False, release_year=2019)
        assert car_to_record(car) == {
            "id": "1",
            "name": "Onix",
            "available": True,
            "gasAvailable": False,
            "releaseYear": 2019,
        }

    def test_category_record(self):
        category = CarCategory(id="c", name="Hatch", car_ids=("1",), price=Decimal("20.5"))
        assert car_category_to_record(category) == {
            "id": "c",
            "name": "Hatch",
            "carIds": ["1"],
            "price": 20.5,
        }
