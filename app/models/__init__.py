"""Modeles ORM SQLAlchemy -- importe tous les modeles pour les enregistrer dans les metadonnees."""

from app.models.electric_car import ElectricCar  # noqa: F401
