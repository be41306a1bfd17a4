"""Table des operateurs de filtre.

Chaque operateur a deux rendus qui doivent rester equivalents :
    - evaluate() : evaluation pure en memoire (tests, InMemoryCarStore)
    - sql_clause() : expression SQLAlchemy, valeurs toujours liees en parametres

Semantique commune :
    - contains / startsWith / endsWith : insensible a la casse (ASCII seulement,
      comme lower() de SQLite), les jokers LIKE de la valeur sont echappes.
      Sur une colonne numerique, on compare la forme texte du nombre.
    - equals : egalite exacte sensible a la casse ; numerique sur une colonne
      numerique (la valeur est alors deja un float).
    - isEmpty / isNotEmpty : NULL ou chaine vide, et leur complement exact.
    - comparaisons : numeriques, NULL ne correspond jamais. Sur une colonne
      texte, on lit le prefixe numerique du champ (comme CAST de SQLite :
      "8/24/16" vaut 8) ; un champ sans prefixe numerique ne correspond pas.
"""

import operator as _op
import re
import string
from enum import Enum
from typing import Any

from sqlalchemy import Float, String, and_, cast, or_

from app.query.columns import CarColumn

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# Meme motif cote SQL (regexp_match) et en memoire
NUMERIC_PREFIX = r"^ *[-+]?([0-9]+\.?[0-9]*|\.[0-9]+)"
_NUMERIC_PREFIX_RE = re.compile(NUMERIC_PREFIX + r"([eE][-+]?[0-9]+)?")


class Operator(str, Enum):
    """Operateurs acceptes dans un FilterSpec (valeurs telles que sur le fil)."""

    CONTAINS = "contains"
    EQUALS = "equals"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    IS_EMPTY = "isEmpty"
    IS_NOT_EMPTY = "isNotEmpty"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"

    @property
    def needs_value(self) -> bool:
        return self not in (Operator.IS_EMPTY, Operator.IS_NOT_EMPTY)

    @property
    def is_comparison(self) -> bool:
        return self in _COMPARATORS


# Le module operator marche aussi bien sur des floats que sur des colonnes SQLAlchemy
_COMPARATORS = {
    Operator.GREATER_THAN: _op.gt,
    Operator.LESS_THAN: _op.lt,
    Operator.GREATER_THAN_OR_EQUAL: _op.ge,
    Operator.LESS_THAN_OR_EQUAL: _op.le,
}


def resolve_operator(name: Any) -> Operator | None:
    """Retourne l'operateur correspondant a ce nom exact, sinon None."""
    if not isinstance(name, str):
        return None
    try:
        return Operator(name)
    except ValueError:
        return None


def _fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def leading_number(text: str) -> float | None:
    """Prefixe numerique d'un texte ("8/24/16" -> 8.0), None s'il n'y en a pas."""
    match = _NUMERIC_PREFIX_RE.match(text)
    if match is None:
        return None
    return float(match.group(0))


def evaluate(operator: Operator, column: CarColumn, field: Any, literal: Any) -> bool:
    """Applique l'operateur a une valeur de champ en memoire."""
    if operator is Operator.IS_EMPTY:
        return _is_empty(field)
    if operator is Operator.IS_NOT_EMPTY:
        return not _is_empty(field)
    if field is None:
        return False

    if operator in _COMPARATORS:
        number = float(field) if column.is_numeric else leading_number(str(field))
        if number is None:
            return False
        return _COMPARATORS[operator](number, literal)
    if operator is Operator.EQUALS:
        if column.is_numeric:
            return float(field) == literal
        return str(field) == literal

    haystack = _fold(str(field))
    needle = _fold(literal)
    if operator is Operator.CONTAINS:
        return needle in haystack
    if operator is Operator.STARTS_WITH:
        return haystack.startswith(needle)
    if operator is Operator.ENDS_WITH:
        return haystack.endswith(needle)
    raise ValueError(f"Unhandled operator {operator!r}")


def sql_clause(operator: Operator, column: CarColumn, expr, literal: Any):
    """Construit l'expression SQLAlchemy equivalente a evaluate()."""
    if operator is Operator.IS_EMPTY:
        if column.is_numeric:
            return expr.is_(None)
        return or_(expr.is_(None), expr == "")
    if operator is Operator.IS_NOT_EMPTY:
        if column.is_numeric:
            return expr.is_not(None)
        return and_(expr.is_not(None), expr != "")

    if operator in _COMPARATORS:
        if column.is_numeric:
            return _COMPARATORS[operator](expr, literal)
        return and_(
            expr.regexp_match(NUMERIC_PREFIX),
            _COMPARATORS[operator](cast(expr, Float), literal),
        )
    if operator is Operator.EQUALS:
        return expr == literal

    text_expr = cast(expr, String) if column.is_numeric else expr
    if operator is Operator.CONTAINS:
        return text_expr.icontains(literal, autoescape=True)
    if operator is Operator.STARTS_WITH:
        return text_expr.istartswith(literal, autoescape=True)
    if operator is Operator.ENDS_WITH:
        return text_expr.iendswith(literal, autoescape=True)
    raise ValueError(f"Unhandled operator {operator!r}")


def operators_for(column: CarColumn) -> list[Operator]:
    """Operateurs applicables a une colonne : tous, texte comme numerique."""
    return list(Operator)
