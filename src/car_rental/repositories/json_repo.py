"""Read-only repositories backed by JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Generic, List, Mapping, Optional, TypeVar

from car_rental.domain.models import Car, CarCategory, Customer
from car_rental.logging_config import get_logger
from car_rental.repositories.mappers import (
    car_category_from_record,
    car_from_record,
    customer_from_record,
)
from car_rental.services.errors import RepositoryError

T = TypeVar("T")


class JsonRepository(Generic[T]):
    """Lookups over a JSON array of records.

    The file is read once, on first access, and the parsed list is kept for
    the life of the instance.
    """

    def __init__(self, file: Path | str, mapper: Callable[[Mapping[str, Any]], T]) -> None:
        self._file = Path(file)
        self._mapper = mapper
        self._records: Optional[list[Mapping[str, Any]]] = None
        self._logger = get_logger(self.__class__.__name__)

    @property
    def file(self) -> Path:
        return self._file

    def _load(self) -> list[Mapping[str, Any]]:
        if self._records is not None:
            return self._records
        try:
            data = json.loads(self._file.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            self._logger.error("Data file not found: %s", self._file)
            raise RepositoryError(
                f"Arquivo de dados não encontrado: {self._file}"
            ) from exc
        except (OSError, json.JSONDecodeError) as exc:
            self._logger.exception("Failed to read data file %s", self._file)
            raise RepositoryError(
                f"Não foi possível ler o arquivo de dados: {self._file}"
            ) from exc
        if not isinstance(data, list) or not all(
            isinstance(item, dict) for item in data
        ):
            self._logger.error(
                "Data file %s does not hold a JSON array of objects", self._file
            )
            raise RepositoryError(
                f"Formato inválido no arquivo de dados: {self._file}"
            )
        self._logger.debug("Loaded %d records from %s", len(data), self._file)
        self._records = data
        return data

    def _map(self, record: Mapping[str, Any]) -> T:
        try:
            return self._mapper(record)
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            self._logger.error(
                "Invalid record %r in %s: %s", record.get("id"), self._file, exc
            )
            raise RepositoryError(
                f"Registro inválido no arquivo de dados: {self._file}"
            ) from exc

    def find(self, record_id: str) -> Optional[T]:
        for record in self._load():
            if record.get("id") == record_id:
                return self._map(record)
        return None

    def list_all(self) -> List[T]:
        return [self._map(record) for record in self._load()]


class CarRepo(JsonRepository[Car]):
    """Cars stored in ``cars.json``."""

    def __init__(self, file: Path | str) -> None:
        super().__init__(file, car_from_record)


class CarCategoryRepo(JsonRepository[CarCategory]):
    """Car categories stored in ``carCategory.json``."""

    def __init__(self, file: Path | str) -> None:
        super().__init__(file, car_category_from_record)


class CustomerRepo(JsonRepository[Customer]):
    """Customers stored in ``customer.json``."""

    def __init__(self, file: Path | str) -> None:
        super().__init__(file, customer_from_record)
