"""Classes de configuration pour l'application EV Catalog."""

import os
import tempfile
from pathlib import Path

basedir = Path(__file__).resolve().parent


class Config:
    """Configuration de base (production)."""

    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{basedir / 'data' / 'ev_catalog.db'}",
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # CORS -- la grille front tourne sur un autre port (ex. localhost:3000)
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*").split(",")

    # Jeu de donnees CSV importe par scripts/import_csv.py
    CARS_CSV_PATH = os.environ.get(
        "CARS_CSV_PATH",
        str(basedir / "data" / "ElectricCarData_Clean.csv"),
    )

    # Journalisation
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class DevConfig(Config):
    """Configuration de developpement."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class TestConfig(Config):
    """Configuration de test."""

    TESTING = True
    # Fichier temporaire plutot que :memory: pour que toutes les connexions
    # du pool voient les memes tables.
    _test_db = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
    SQLALCHEMY_DATABASE_URI = f"sqlite:///{_test_db.name}"
    SQLALCHEMY_ENGINE_OPTIONS = {
        "connect_args": {"check_same_thread": False},
    }
    RATELIMIT_ENABLED = False
    LOG_LEVEL = "DEBUG"


config_by_name = {
    "development": DevConfig,
    "testing": TestConfig,
    "production": Config,
}
