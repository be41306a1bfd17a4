"""Fabrique d'application Flask pour EV Catalog."""

import logging
import os

from flask import Flask

from app.extensions import cors, db, limiter
from app.logging_config import setup_logging
from app.version import get_version
from config import config_by_name

logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """Cree et configure l'application Flask.

    Args:
        config_name: Un parmi 'development', 'testing', 'production'.
                     Par defaut, utilise la variable d'env FLASK_ENV ou 'development'.
    """
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.config.setdefault("APP_VERSION", get_version())

    setup_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Initialisation des extensions
    db.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ORIGINS"])
    limiter.init_app(app)

    # Headers de securite HTTP
    @app.after_request
    def add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        return resp

    @app.route("/")
    def index():
        return "EV Catalog API is running..."

    # Enregistrement des blueprints
    from app.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    with app.app_context():
        from app import models  # noqa: F401

        db.create_all()

    logger.info("EV Catalog app created with config '%s'", config_name)
    return app
