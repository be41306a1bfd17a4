"""Import du jeu de donnees CSV des voitures electriques dans electric_cars.

Format attendu (en-tete Kaggle "ElectricCarData_Clean", colonne Date optionnelle) :
    Brand,Model,AccelSec,TopSpeed_KmH,Range_Km,Efficiency_WhKm,FastCharge_KmH,
    RapidCharge,PowerTrain,PlugType,BodyStyle,Segment,Seats,PriceEuro,Date
"""

import csv
import logging
from pathlib import Path
from typing import Any

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError

from app.errors import CsvImportError
from app.extensions import db
from app.models.electric_car import ElectricCar

logger = logging.getLogger(__name__)

# En-tete CSV → (colonne electric_cars, convertisseur)
TEXT_FIELDS = {
    "Brand": "brand",
    "Model": "model",
    "RapidCharge": "rapid_charge",
    "PowerTrain": "power_train",
    "PlugType": "plug_type",
    "BodyStyle": "body_style",
    "Segment": "segment",
    "Date": "date",
}
INT_FIELDS = {
    "TopSpeed_KmH": "top_speed_kmh",
    "Range_Km": "range_km",
    "Efficiency_WhKm": "efficiency_whkm",
    "FastCharge_KmH": "fast_charge_kmh",
    "Seats": "seats",
    "PriceEuro": "price_euro",
}
FLOAT_FIELDS = {
    "AccelSec": "accel_sec",
}

# Valeurs qui signifient "non renseigne" dans le CSV
_MISSING = {"", "-", "n/a", "na", "null"}


def text_or_none(val: str | None) -> str | None:
    """Nettoie une cellule texte ; None si vide."""
    if val is None:
        return None
    cleaned = val.strip()
    return cleaned or None


def float_or_none(val: str | None) -> float | None:
    """Convertit une chaine en float ou retourne None."""
    if val is None or val.strip().lower() in _MISSING:
        return None
    try:
        return float(val.strip())
    except (ValueError, OverflowError):
        return None


def int_or_none(val: str | None) -> int | None:
    """Convertit une chaine en int ou retourne None (accepte "5.0")."""
    number = float_or_none(val)
    if number is None:
        return None
    try:
        return int(number)
    except (ValueError, OverflowError):
        return None


def parse_row(row: dict[str, str | None]) -> dict[str, Any] | None:
    """Convertit une ligne CSV en kwargs ElectricCar ; None si marque/modele absents."""
    row = {(k or "").strip(): v for k, v in row.items()}
    car: dict[str, Any] = {}
    for header, column in TEXT_FIELDS.items():
        car[column] = text_or_none(row.get(header))
    for header, column in INT_FIELDS.items():
        car[column] = int_or_none(row.get(header))
    for header, column in FLOAT_FIELDS.items():
        car[column] = float_or_none(row.get(header))

    if not car["brand"] or not car["model"]:
        return None
    return car


def read_csv(path: str | Path) -> list[dict[str, Any]]:
    """Lit et convertit toutes les lignes exploitables du fichier."""
    path = Path(path)
    if not path.exists():
        raise CsvImportError(f"Fichier CSV introuvable : {path}")

    cars = []
    skipped = 0
    try:
        with open(path, encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            for line_no, row in enumerate(reader, start=2):
                car = parse_row(row)
                if car is None:
                    skipped += 1
                    logger.debug("Skipping CSV line %d: missing brand or model", line_no)
                    continue
                cars.append(car)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise CsvImportError(f"Lecture du CSV impossible : {exc}") from exc

    logger.info("Parsed %d cars from %s (%d skipped)", len(cars), path.name, skipped)
    return cars


def import_cars(path: str | Path, replace: bool = True) -> int:
    """Importe le CSV dans electric_cars (doit etre appele dans un app context).

    Args:
        path: Chemin du fichier CSV.
        replace: Vide la table avant l'import (comportement par defaut).

    Returns:
        Nombre de voitures inserees.
    """
    cars = read_csv(path)

    try:
        if replace:
            result = db.session.execute(delete(ElectricCar))
            logger.info("Cleared %d existing cars", result.rowcount)

        db.session.add_all([ElectricCar(**car) for car in cars])
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise CsvImportError(f"Import en base impossible : {exc}") from exc
    logger.info("Imported %d cars into electric_cars", len(cars))
    return len(cars)
