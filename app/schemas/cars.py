"""Schemas Pydantic pour les points d'acces /api/cars."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FilterSpec(BaseModel):
    """Une condition colonne/operateur/valeur telle que recue sur le fil.

    Champs non types : build_predicate() rejette chaque entree incomplete
    individuellement (colonne inconnue, valeur invalide). Les valeurs
    numeriques JSON sont converties en texte.
    """

    model_config = ConfigDict(extra="ignore")

    column: Any = None
    operator: Any = None
    value: Any = None

    @field_validator("value", mode="before")
    @classmethod
    def _number_to_text(cls, value: Any) -> Any:
        # bool herite de int : reste bool, rejete par le constructeur
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class CarSchema(BaseModel):
    """Une voiture electrique telle que renvoyee par l'API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    brand: str | None = None
    model: str | None = None
    accel_sec: float | None = None
    top_speed_kmh: int | None = None
    range_km: int | None = None
    efficiency_whkm: int | None = None
    fast_charge_kmh: int | None = None
    rapid_charge: str | None = None
    power_train: str | None = None
    plug_type: str | None = None
    body_style: str | None = None
    segment: str | None = None
    seats: int | None = None
    price_euro: int | None = None
    date: str | None = None
    created_at: datetime | None = None


class ColumnInfo(BaseModel):
    """Metadonnees d'une colonne, consommees par la grille generique du front."""

    name: str
    type: str = Field(..., description="Type SQL, ex. VARCHAR(100)")
    kind: str | None = Field(None, description="'text' ou 'number' si filtrable")
    nullable: bool
    primary_key: bool = False
    filterable: bool = False
    searchable: bool = False
    operators: list[str] = []
