"""Routes API transverses."""

from flask import current_app, jsonify

from app.api import api_bp


@api_bp.route("/health", methods=["GET"])
def health():
    """Point de controle de sante de l'API."""
    return jsonify(
        {
            "success": True,
            "data": {
                "status": "ok",
                "version": current_app.config.get("APP_VERSION", "0.0.0"),
            },
        }
    )
