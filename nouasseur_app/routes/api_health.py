# nouasseur_app/routes/api_health.py

from datetime import datetime, timezone

from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from nouasseur_app.models import db
from nouasseur_app.utils.database import check_database


def register_health_routes(app):
    """Register the public health probe"""

    @app.route(app.config.get("HEALTH_CHECK_ENDPOINT", "/api/health"), methods=["GET"])
    def api_health():
        timestamp = datetime.now(timezone.utc).isoformat()
        try:
            check_database()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Health check failed: {str(e)}", exc_info=True)
            return jsonify({"status": "error", "timestamp": timestamp, "database": {"connected": False}}), 503

        return jsonify({"status": "ok", "timestamp": timestamp, "database": {"connected": True}}), 200
