"""Stockage des voitures : execute un Predicate et renvoie les lignes triees par id.

Deux implementations du meme contrat :
    - SqlCarStore : requete SQLAlchemy sur electric_cars (production)
    - InMemoryCarStore : liste de dicts, sert de reference dans les tests

Pour les memes donnees et le meme predicat, les deux renvoient les memes ids
dans le meme ordre.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import select

from app.extensions import db
from app.models.electric_car import ElectricCar
from app.query.builder import Predicate

logger = logging.getLogger(__name__)


class CarStore(ABC):
    """Collaborateur de stockage consomme par car_service.list_cars()."""

    @abstractmethod
    def execute_query(self, predicate: Predicate) -> list[Any]:
        """Retourne les voitures satisfaisant le predicat, par id croissant."""


class SqlCarStore(CarStore):
    """Execute le predicat sur la table electric_cars via la session Flask-SQLAlchemy."""

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def execute_query(self, predicate: Predicate) -> list[ElectricCar]:
        stmt = (
            select(ElectricCar)
            .where(predicate.to_sql(ElectricCar))
            .order_by(ElectricCar.id.asc())
        )
        rows = list(self.session.execute(stmt).scalars().all())
        logger.debug("SqlCarStore returned %d rows", len(rows))
        return rows


class InMemoryCarStore(CarStore):
    """Implementation de reference en memoire.

    Les enregistrements sont des dicts avec au minimum une cle "id".
    """

    def __init__(self, records: list[dict[str, Any]] | None = None):
        self._records = list(records or [])

    def add(self, record: dict[str, Any]) -> None:
        self._records.append(record)

    def execute_query(self, predicate: Predicate) -> list[dict[str, Any]]:
        matches = [r for r in self._records if predicate.matches(r)]
        return sorted(matches, key=lambda r: r["id"])
