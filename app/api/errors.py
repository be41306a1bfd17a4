"""Gestionnaires d'erreurs API -- retournent du JSON, n'exposent jamais les stack traces."""

import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError

from app.api import api_bp
from app.errors import CarNotFoundError, EVCatalogError, FilterQueryError
from app.extensions import db

logger = logging.getLogger(__name__)


def _error(status: int, code: str, message: str, data=None):
    return jsonify(
        {
            "success": False,
            "error": code,
            "message": message,
            "data": data,
        }
    ), status


@api_bp.errorhandler(FilterQueryError)
def handle_filter_error(exc):
    logger.warning("Filter validation error: %s", exc)
    return _error(400, exc.code, str(exc), exc.to_dict())


@api_bp.errorhandler(CarNotFoundError)
def handle_car_not_found(exc):
    return _error(404, "NOT_FOUND", "Voiture introuvable.", {"id": exc.car_id})


@api_bp.errorhandler(EVCatalogError)
def handle_catalog_error(exc):
    logger.error("EV Catalog error: %s", exc)
    return _error(500, "INTERNAL_ERROR", "Une erreur est survenue. Réessayez plus tard.")


@api_bp.errorhandler(SQLAlchemyError)
def handle_database_error(exc):
    db.session.rollback()
    logger.error("Database error: %s: %s", type(exc).__name__, exc)
    return _error(500, "DATABASE_ERROR", "Erreur d'accès aux données.")


@api_bp.errorhandler(404)
def handle_not_found(exc):
    return _error(404, "NOT_FOUND", "Cette route n'existe pas.")


@api_bp.errorhandler(500)
def handle_internal_error(exc):
    logger.error("Unhandled error: %s", exc)
    return _error(500, "INTERNAL_ERROR", "Erreur interne du serveur.")
