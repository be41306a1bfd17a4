#!/usr/bin/env python3
"""Import du CSV des voitures electriques dans electric_cars.

Vide la table puis insere toutes les lignes exploitables du fichier.

Usage :
    python scripts/import_csv.py                # chemin CARS_CSV_PATH de la config
    python scripts/import_csv.py chemin.csv     # chemin explicite
    python scripts/import_csv.py --append f.csv # sans vider la table
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app import create_app  # noqa: E402
from app.errors import CsvImportError  # noqa: E402
from app.services.csv_import import import_cars  # noqa: E402

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Importe le CSV des voitures électriques.")
    parser.add_argument("csv_path", nargs="?", help="Chemin du CSV (défaut : CARS_CSV_PATH)")
    parser.add_argument(
        "--append", action="store_true", help="Ajoute les lignes sans vider la table"
    )
    args = parser.parse_args(argv)

    app = create_app()
    csv_path = args.csv_path or app.config["CARS_CSV_PATH"]

    with app.app_context():
        try:
            count = import_cars(csv_path, replace=not args.append)
        except CsvImportError as exc:
            logger.error("Import failed: %s", exc)
            return 1

    print(f"Successfully imported {count} cars into electric_cars.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
