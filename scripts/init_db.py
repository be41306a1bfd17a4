#!/usr/bin/env python3
"""Initialise la base -- cree la table electric_cars et affiche son contenu.

Usage:
    python scripts/init_db.py            # cree la table si besoin
    python scripts/init_db.py --import   # puis charge CARS_CSV_PATH si la table est vide
"""

import argparse
import sys
from pathlib import Path

# Racine du projet sur sys.path pour lancer le script directement
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import func, select  # noqa: E402

from app import create_app  # noqa: E402
from app.errors import CsvImportError  # noqa: E402
from app.extensions import db  # noqa: E402
from app.models.electric_car import ElectricCar  # noqa: E402
from app.services.csv_import import import_cars  # noqa: E402


def count_cars() -> int:
    return db.session.execute(select(func.count()).select_from(ElectricCar)).scalar_one()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialise la table electric_cars.")
    parser.add_argument(
        "--import",
        dest="load_csv",
        action="store_true",
        help="Charge CARS_CSV_PATH si la table est vide",
    )
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        db.create_all()
        print(f"Database ready: {app.config['SQLALCHEMY_DATABASE_URI']}")

        count = count_cars()
        if args.load_csv and count == 0:
            try:
                import_cars(app.config["CARS_CSV_PATH"])
            except CsvImportError as exc:
                print(f"Import failed: {exc}", file=sys.stderr)
                return 1
            count = count_cars()

        print(f"  - {ElectricCar.__tablename__}: {count} rows")
        if count:
            brands = db.session.execute(
                select(ElectricCar.brand, func.count())
                .group_by(ElectricCar.brand)
                .order_by(func.count().desc(), ElectricCar.brand)
                .limit(5)
            ).all()
            for brand, n in brands:
                print(f"      {brand}: {n}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
