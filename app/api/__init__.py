"""Blueprint API -- points d'acces REST consommes par la grille du front."""

from flask import Blueprint

api_bp = Blueprint("api", __name__)

from app.api import car_routes, errors, routes  # noqa: E402, F401
