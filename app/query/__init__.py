"""Construction des predicats de filtre/recherche sur la table electric_cars."""

from app.query.builder import FilterClause, Predicate, build_predicate, decode_filters_param
from app.query.columns import SEARCH_COLUMNS, CarColumn, ColumnKind, resolve_column
from app.query.operators import Operator, operators_for, resolve_operator

__all__ = [
    "SEARCH_COLUMNS",
    "CarColumn",
    "ColumnKind",
    "FilterClause",
    "Operator",
    "Predicate",
    "build_predicate",
    "decode_filters_param",
    "operators_for",
    "resolve_column",
    "resolve_operator",
]
