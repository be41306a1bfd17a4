"""Liste autorisee des colonnes filtrables de la table electric_cars.

Les noms de colonne ne peuvent pas etre passes en parametre SQL : seule une
valeur de CarColumn peut atteindre la requete. Tout autre nom est rejete.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ColumnKind(str, Enum):
    """Type semantique d'une colonne, pilote la coercition des valeurs."""

    TEXT = "text"
    NUMBER = "number"


class CarColumn(str, Enum):
    """Colonnes de electric_cars accessibles aux filtres.

    created_at n'y figure pas : c'est un horodatage technique, pas une donnee.
    """

    ID = "id"
    BRAND = "brand"
    MODEL = "model"
    ACCEL_SEC = "accel_sec"
    TOP_SPEED_KMH = "top_speed_kmh"
    RANGE_KM = "range_km"
    EFFICIENCY_WHKM = "efficiency_whkm"
    FAST_CHARGE_KMH = "fast_charge_kmh"
    RAPID_CHARGE = "rapid_charge"
    POWER_TRAIN = "power_train"
    PLUG_TYPE = "plug_type"
    BODY_STYLE = "body_style"
    SEGMENT = "segment"
    SEATS = "seats"
    PRICE_EURO = "price_euro"
    DATE = "date"

    @property
    def kind(self) -> ColumnKind:
        return ColumnKind.NUMBER if self in NUMERIC_COLUMNS else ColumnKind.TEXT

    @property
    def is_numeric(self) -> bool:
        return self.kind is ColumnKind.NUMBER

    def sql_column(self, model):
        """Attribut SQLAlchemy correspondant sur le modele ORM."""
        return getattr(model, self.value)

    def read(self, record: Any) -> Any:
        """Lit la valeur de la colonne sur un dict ou un objet ORM."""
        if isinstance(record, Mapping):
            return record.get(self.value)
        return getattr(record, self.value, None)


NUMERIC_COLUMNS = frozenset(
    {
        CarColumn.ID,
        CarColumn.ACCEL_SEC,
        CarColumn.TOP_SPEED_KMH,
        CarColumn.RANGE_KM,
        CarColumn.EFFICIENCY_WHKM,
        CarColumn.FAST_CHARGE_KMH,
        CarColumn.SEATS,
        CarColumn.PRICE_EURO,
    }
)

# Colonnes parcourues par la recherche libre (bloc OR)
SEARCH_COLUMNS = (
    CarColumn.BRAND,
    CarColumn.MODEL,
    CarColumn.BODY_STYLE,
    CarColumn.SEGMENT,
    CarColumn.POWER_TRAIN,
)


def resolve_column(name: Any) -> CarColumn | None:
    """Retourne la colonne autorisee pour ce nom exact, sinon None."""
    if not isinstance(name, str):
        return None
    try:
        return CarColumn(name)
    except ValueError:
        return None
