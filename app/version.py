"""Numero de version de l'application (fichier VERSION a la racine)."""

from functools import lru_cache
from pathlib import Path

VERSION_FILE = Path(__file__).resolve().parent.parent / "VERSION"


@lru_cache(maxsize=1)
def get_version() -> str:
    """Lit VERSION une seule fois ; "0.0.0" si le fichier est absent."""
    try:
        return VERSION_FILE.read_text(encoding="utf-8").strip() or "0.0.0"
    except FileNotFoundError:
        return "0.0.0"
