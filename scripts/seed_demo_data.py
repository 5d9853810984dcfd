"""Seed demo data into the CarRental JSON database."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from car_rental.config import DEFAULT_SEED, ITEMS_AMOUNT
from car_rental.logging_config import configure_logging
from car_rental.seed import seed_database

DEFAULT_OUTPUT = REPO_ROOT / "database"


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed demo data for CarRental")
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help="Pasta onde os arquivos JSON serão gravados.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="Seed para aleatoriedade.",
    )
    parser.add_argument(
        "--items",
        type=int,
        default=ITEMS_AMOUNT,
        help="Quantidade de itens extras gerados por entidade.",
    )
    return parser.parse_args()


def main() -> int:
    args = _parse_args()
    configure_logging()
    data = seed_database(args.output, seed=args.seed, items_amount=args.items)
    print(f"Categoria: {data.car_category.id} ({data.car_category.name})")
    for customer in data.customers:
        print(f"Cliente: {customer.id} - {customer.name}, {customer.age} anos")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
