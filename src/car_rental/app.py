"""Application entry point."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from dateutil import parser as date_parser

from car_rental.config import DEFAULT_SEED, ITEMS_AMOUNT, AppConfig
from car_rental.domain.models import Transaction
from car_rental.logging_config import configure_logging, get_logger
from car_rental.paths import get_config_path, get_database_dir, get_pdfs_dir
from car_rental.repositories import CarCategoryRepo, CustomerRepo
from car_rental.seed import seed_database
from car_rental.services.car_service import CarService
from car_rental.services.errors import NotFoundError, ServiceError
from car_rental.utils.pdf_generator import build_receipt_filename, generate_receipt_pdf
from car_rental.utils.settings import DataFiles, load_database_settings


def _parse_date(value: str) -> date:
    try:
        return date_parser.isoparse(value).date()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Data inválida: {value}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="car_rental",
        description="Locação de carros com preço por faixa etária.",
    )
    parser.add_argument(
        "--database-dir",
        type=Path,
        default=None,
        help="Pasta com cars.json, carCategory.json e customer.json.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    seed_parser = subparsers.add_parser("seed", help="Gera dados de demonstração.")
    seed_parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="Seed para aleatoriedade.",
    )
    seed_parser.add_argument(
        "--items",
        type=int,
        default=ITEMS_AMOUNT,
        help="Quantidade de itens extras gerados por entidade.",
    )

    rent_parser = subparsers.add_parser("rent", help="Aluga um carro.")
    rent_parser.add_argument("--customer-id", required=True)
    rent_parser.add_argument("--category-id", required=True)
    rent_parser.add_argument("--days", type=int, required=True)
    rent_parser.add_argument(
        "--start-date",
        type=_parse_date,
        default=None,
        help="Data de retirada (AAAA-MM-DD). Padrão: hoje.",
    )
    rent_parser.add_argument(
        "--pdf",
        nargs="?",
        type=Path,
        const=True,
        default=None,
        help="Gera o recibo em PDF (caminho opcional).",
    )
    return parser


def _resolve_database_dir(explicit: Optional[Path]) -> Path:
    if explicit is not None:
        return explicit
    settings = load_database_settings(get_config_path())
    return settings.resolve_dir(get_database_dir())


def _print_receipt(transaction: Transaction) -> None:
    print(f"Cliente: {transaction.customer.name} ({transaction.customer.age} anos)")
    print(f"Veículo: {transaction.car.name} ({transaction.car.release_year})")
    print(f"Devolução: {transaction.due_date}")
    print(f"Total: {transaction.amount}")


def _run_seed(args: argparse.Namespace, database_dir: Path) -> int:
    data = seed_database(database_dir, seed=args.seed, items_amount=args.items)
    print(
        f"Dados gerados em {database_dir}: categoria {data.car_category.id}, "
        f"{len(data.cars)} carros, {len(data.customers)} clientes."
    )
    return 0


def _run_rent(args: argparse.Namespace, database_dir: Path, config: AppConfig) -> int:
    files = DataFiles.in_dir(database_dir)
    customer = CustomerRepo(files.customers).find(args.customer_id)
    if customer is None:
        raise NotFoundError(f"Cliente {args.customer_id} não encontrado.")
    category = CarCategoryRepo(files.car_categories).find(args.category_id)
    if category is None:
        raise NotFoundError(f"Categoria {args.category_id} não encontrada.")

    start_date: Optional[date] = args.start_date
    service = CarService(
        files.cars,
        locale=config.locale,
        today=(lambda: start_date) if start_date else date.today,
    )
    transaction = service.rent(customer, category, args.days)
    _print_receipt(transaction)

    if args.pdf is not None:
        if args.pdf is True:
            output_path = get_pdfs_dir() / build_receipt_filename(customer.name)
        else:
            output_path = args.pdf
        generate_receipt_pdf(
            transaction,
            output_path,
            number_of_days=args.days,
            category=category,
            locale=config.locale,
        )
        print(f"Recibo salvo em {output_path}")
    return 0


def main(
    argv: Optional[Sequence[str]] = None,
    config: Optional[AppConfig] = None,
) -> int:
    """Run the CarRental command line."""
    args = build_parser().parse_args(argv)
    configure_logging()
    config = config or AppConfig()
    logger = get_logger(__name__)
    logger.info("Starting %s (%s)", config.app_name, args.command)

    database_dir = _resolve_database_dir(args.database_dir)
    try:
        if args.command == "seed":
            return _run_seed(args, database_dir)
        return _run_rent(args, database_dir, config)
    except ServiceError as exc:
        logger.error("Command %s failed: %s", args.command, exc)
        print(f"Erro: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
