"""Service voitures : liste filtree, detail, suppression, description des colonnes."""

import logging
from dataclasses import dataclass, field
from typing import Any

from app.errors import CarNotFoundError, FilterQueryError
from app.extensions import db
from app.models.electric_car import ElectricCar
from app.query.builder import build_predicate, decode_filters_param
from app.query.columns import SEARCH_COLUMNS, resolve_column
from app.query.operators import operators_for
from app.schemas.cars import ColumnInfo, FilterSpec
from app.services.car_store import CarStore, SqlCarStore

logger = logging.getLogger(__name__)


@dataclass
class ListResult:
    """Resultat de list_cars().

    Attributs :
        cars: Voitures retenues, par id croissant.
        warnings: Erreurs non bloquantes (filtre ignore, payload illisible).
        applied: Filtres effectivement appliques, dans l'ordre recu.
    """

    cars: list[Any]
    warnings: list[FilterQueryError] = field(default_factory=list)
    applied: list[dict[str, Any]] = field(default_factory=list)


def list_cars(
    search: str | None = None,
    filters: list[FilterSpec] | None = None,
    store: CarStore | None = None,
) -> ListResult:
    """Liste les voitures satisfaisant la recherche et tous les filtres.

    Raises:
        FilterQueryError: la premiere erreur qui rejette la requete
            (UnknownColumnError, ValueTypeError), meme si d'autres filtres
            de la liste sont valides.
    """
    predicate, errors = build_predicate(search, filters)

    rejecting = [e for e in errors if e.rejects_request]
    if rejecting:
        logger.warning("Filter request rejected: %s", "; ".join(str(e) for e in rejecting))
        raise rejecting[0]

    warnings = [e for e in errors if not e.rejects_request]
    for warning in warnings:
        logger.warning("Filter dropped at index %s: %s", warning.index, warning)

    store = store or SqlCarStore()
    cars = store.execute_query(predicate)
    logger.info(
        "Listed %d cars (search=%r, filters=%d)",
        len(cars),
        predicate.search,
        len(predicate.clauses),
    )
    return ListResult(cars=cars, warnings=warnings, applied=predicate.describe())


def list_cars_from_params(
    search: str | None,
    raw_filters: Any,
    store: CarStore | None = None,
) -> ListResult:
    """Variante de list_cars() qui decode d'abord le parametre filters brut."""
    specs, payload_errors = decode_filters_param(raw_filters)
    for error in payload_errors:
        logger.warning("Ignoring filters payload: %s", error)
    result = list_cars(search, specs, store=store)
    result.warnings = payload_errors + result.warnings
    return result


def get_car(car_id: int) -> ElectricCar:
    """Retourne la voiture ou leve CarNotFoundError."""
    car = db.session.get(ElectricCar, car_id)
    if car is None:
        raise CarNotFoundError(car_id)
    return car


def delete_car(car_id: int) -> None:
    """Supprime definitivement la voiture ou leve CarNotFoundError."""
    car = get_car(car_id)
    label = f"{car.brand} {car.model}"
    db.session.delete(car)
    db.session.commit()
    logger.info("Deleted car id=%d (%s)", car_id, label)


def describe_columns() -> list[ColumnInfo]:
    """Decrit les colonnes de electric_cars et ce que les filtres en acceptent."""
    columns = []
    for col in ElectricCar.__table__.columns:
        allowed = resolve_column(col.name)
        columns.append(
            ColumnInfo(
                name=col.name,
                type=str(col.type),
                kind=allowed.kind.value if allowed else None,
                nullable=bool(col.nullable),
                primary_key=bool(col.primary_key),
                filterable=allowed is not None,
                searchable=allowed in SEARCH_COLUMNS,
                operators=[op.value for op in operators_for(allowed)] if allowed else [],
            )
        )
    return columns
