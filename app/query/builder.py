"""Constructeur de predicat pour la liste des voitures.

Traduit un terme de recherche libre et une liste ordonnee de FilterSpec en un
Predicate : (bloc OR de recherche) AND filtre1 AND filtre2 ...

Le constructeur est une fonction pure. Il ne leve jamais d'exception pour une
entree invalide : les erreurs sont collectees et retournees avec le predicat,
l'appelant decide (voir FilterQueryError.rejects_request).

Usage:
    specs, payload_errors = decode_filters_param(request.args.get("filters"))
    predicate, errors = build_predicate(request.args.get("search"), specs)
    rows = select(ElectricCar).where(predicate.to_sql(ElectricCar))
"""

import json
import logging
import math
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import and_, or_, true

from app.errors import (
    FilterQueryError,
    MalformedFilterPayloadError,
    MissingValueError,
    UnknownColumnError,
    UnknownOperatorError,
    ValueTypeError,
)
from app.query.columns import SEARCH_COLUMNS, CarColumn, resolve_column
from app.query.operators import Operator, evaluate, resolve_operator, sql_clause
from app.schemas.cars import FilterSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterClause:
    """Un filtre valide : colonne autorisee, operateur connu, valeur coercee."""

    column: CarColumn
    operator: Operator
    value: str | float | None = None

    def to_sql(self, model):
        return sql_clause(self.operator, self.column, self.column.sql_column(model), self.value)

    def matches(self, record: Any) -> bool:
        return evaluate(self.operator, self.column, self.column.read(record), self.value)

    def describe(self) -> dict[str, Any]:
        return {
            "column": self.column.value,
            "operator": self.operator.value,
            "value": self.value,
        }


@dataclass(frozen=True)
class Predicate:
    """Condition composee appliquee a l'ensemble des voitures.

    Attributs :
        search: Terme de recherche deja nettoye, None si absent.
        clauses: Filtres valides, dans l'ordre de la requete.
    """

    search: str | None = None
    clauses: tuple[FilterClause, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.search is None and not self.clauses

    def _search_clauses(self) -> list[FilterClause]:
        if self.search is None:
            return []
        return [FilterClause(column, Operator.CONTAINS, self.search) for column in SEARCH_COLUMNS]

    def to_sql(self, model):
        """Expression booleenne SQLAlchemy ; toutes les valeurs sont liees."""
        conditions = []
        search = self._search_clauses()
        if search:
            conditions.append(or_(*(clause.to_sql(model) for clause in search)))
        conditions.extend(clause.to_sql(model) for clause in self.clauses)
        return and_(true(), *conditions)

    def matches(self, record: Any) -> bool:
        """Evaluation en memoire, equivalente a to_sql()."""
        search = self._search_clauses()
        if search and not any(clause.matches(record) for clause in search):
            return False
        return all(clause.matches(record) for clause in self.clauses)

    def describe(self) -> list[dict[str, Any]]:
        return [clause.describe() for clause in self.clauses]


def _to_number(raw: str) -> float | None:
    try:
        number = float(raw.strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _build_clause(index: int, spec: FilterSpec, errors: list[FilterQueryError]) -> FilterClause | None:
    """Valide un FilterSpec ; ajoute l'erreur a `errors` et retourne None si invalide."""
    context = {"index": index, "column": spec.column, "operator": spec.operator}

    column = resolve_column(spec.column)
    if column is None:
        errors.append(UnknownColumnError(f"Colonne inconnue : {spec.column!r}.", **context))
        return None

    operator = resolve_operator(spec.operator)
    if operator is None:
        errors.append(
            UnknownOperatorError(f"Opérateur inconnu : {spec.operator!r}, filtre ignoré.", **context)
        )
        return None

    if not operator.needs_value:
        return FilterClause(column, operator)

    if spec.value is None:
        errors.append(
            MissingValueError(f"L'opérateur {operator.value} exige une valeur.", **context)
        )
        return None

    if not isinstance(spec.value, str):
        errors.append(
            ValueTypeError(
                f"Valeur de type {type(spec.value).__name__} pour {column.value}, "
                "texte ou nombre attendu.",
                **context,
            )
        )
        return None

    numeric = operator.is_comparison or (operator is Operator.EQUALS and column.is_numeric)
    if not numeric:
        return FilterClause(column, operator, spec.value)

    number = _to_number(spec.value)
    if number is None:
        errors.append(
            ValueTypeError(
                f"Valeur non numérique pour {column.value} {operator.value} : {spec.value!r}.",
                **context,
            )
        )
        return None
    return FilterClause(column, operator, number)


def build_predicate(
    search: str | None = None,
    filters: list[FilterSpec] | None = None,
) -> tuple[Predicate, list[FilterQueryError]]:
    """Construit le predicat et la liste des erreurs de validation.

    Args:
        search: Terme libre ; vide ou blanc apres strip() = absent.
        filters: FilterSpec dans l'ordre recu, chacun valide independamment.

    Returns:
        (predicate, errors). Les filtres invalides ne produisent aucune clause.
    """
    errors: list[FilterQueryError] = []
    clauses = []
    for index, spec in enumerate(filters or []):
        clause = _build_clause(index, spec, errors)
        if clause is not None:
            clauses.append(clause)

    term = search.strip() if search else ""
    predicate = Predicate(search=term or None, clauses=tuple(clauses))
    logger.debug(
        "Built predicate: search=%r clauses=%d errors=%d",
        predicate.search,
        len(clauses),
        len(errors),
    )
    return predicate, errors


def decode_filters_param(raw: Any) -> tuple[list[FilterSpec], list[FilterQueryError]]:
    """Decode le parametre `filters` (JSON texte ou liste deja decodee).

    Un payload invalide (JSON illisible, pas un tableau, entree qui n'est pas
    un objet) est traite comme une liste vide, avec une MalformedFilterPayloadError.
    Le contenu de chaque objet est valide ensuite par build_predicate(), filtre
    par filtre : une colonne absente y devient une UnknownColumnError.
    """
    if raw is None or raw == "":
        return [], []

    decoded = raw
    if isinstance(raw, (str, bytes)):
        try:
            decoded = json.loads(raw)
        except ValueError as exc:
            return [], [MalformedFilterPayloadError(f"Paramètre filters : JSON invalide ({exc}).")]

    if decoded is None:
        return [], []
    if not isinstance(decoded, list):
        return [], [
            MalformedFilterPayloadError("Paramètre filters : un tableau JSON est attendu.")
        ]

    try:
        specs = [FilterSpec.model_validate(item) for item in decoded]
    except PydanticValidationError as exc:
        return [], [
            MalformedFilterPayloadError(
                f"Paramètre filters : entrée invalide ({exc.error_count()} erreur(s))."
            )
        ]
    return specs, []
