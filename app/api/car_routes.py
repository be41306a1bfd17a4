"""Routes API pour la table des voitures electriques."""

import logging

from flask import jsonify, request

from app.api import api_bp
from app.extensions import limiter
from app.schemas.cars import CarSchema
from app.services import car_service

logger = logging.getLogger(__name__)


def _serialize(car) -> dict:
    return CarSchema.model_validate(car).model_dump(mode="json")


@api_bp.route("/cars", methods=["GET"])
@limiter.limit("60/minute")
def list_cars():
    """Liste les voitures avec recherche libre et filtres optionnels.

    Parametres de requete :
        search: terme cherche dans brand, model, body_style, segment, power_train
        filters: tableau JSON de {column, operator, value}, combines en ET

    Retourne :
        { success, count, data: [...], filters: [...appliques], warnings: [...] }
    """
    result = car_service.list_cars_from_params(
        request.args.get("search"),
        request.args.get("filters"),
    )
    return jsonify(
        {
            "success": True,
            "error": None,
            "message": None,
            "count": len(result.cars),
            "data": [_serialize(car) for car in result.cars],
            "filters": result.applied,
            "warnings": [w.to_dict() for w in result.warnings],
        }
    )


@api_bp.route("/cars/columns", methods=["GET"])
def list_columns():
    """Decrit les colonnes de la table, pour generer la grille cote front."""
    columns = car_service.describe_columns()
    return jsonify(
        {
            "success": True,
            "error": None,
            "message": None,
            "data": [c.model_dump() for c in columns],
        }
    )


@api_bp.route("/cars/<int:car_id>", methods=["GET"])
def get_car(car_id: int):
    """Detail d'une voiture par identifiant."""
    car = car_service.get_car(car_id)
    return jsonify(
        {
            "success": True,
            "error": None,
            "message": None,
            "data": _serialize(car),
        }
    )


@api_bp.route("/cars/<int:car_id>", methods=["DELETE"])
@limiter.limit("20/minute")
def delete_car(car_id: int):
    """Supprime definitivement une voiture."""
    car_service.delete_car(car_id)
    return jsonify(
        {
            "success": True,
            "error": None,
            "message": "Voiture supprimée.",
            "data": {"id": car_id},
        }
    )
