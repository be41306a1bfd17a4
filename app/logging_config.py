"""Configuration de la journalisation pour EV Catalog.

Configure le logging standard Python avec un handler console unique.
"""

import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s in %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: str = "INFO") -> None:
    """Configure le logger racine de l'application."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)

    # SQLAlchemy logue chaque requete en INFO avec echo ; on reste sur WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
