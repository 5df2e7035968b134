# app.py

import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify, render_template, request
from sqlalchemy import event

# Load environment variables from .env file first
load_dotenv()

# Module imports after load_dotenv() - E402 is intentional
from config import get_config_objects  # noqa: E402
from config.validation import validate_and_exit  # noqa: E402
from nouasseur_app.importer.cli import importer_cli  # noqa: E402
from nouasseur_app.middleware.session_auth import init_session_auth, is_api_path  # noqa: E402
from nouasseur_app.models import db  # noqa: E402
from nouasseur_app.routes import init_routes  # noqa: E402
from nouasseur_app.utils.database import wait_for_database  # noqa: E402
from nouasseur_app.utils.logging_config import setup_logging  # noqa: E402

logger = logging.getLogger(__name__)


def _configure_sqlite_connection(dbapi_connection, connection_record):  # pragma: no cover - instrumentation
    """Apply concurrency-friendly pragmas to every new SQLite connection"""
    try:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA busy_timeout=5000")
        cursor.close()
    except Exception as exc:
        logger.warning("Failed to apply SQLite PRAGMAs: %s", exc)


def register_error_handlers(app):
    """JSON envelopes for /api paths, templates for pages"""

    @app.errorhandler(404)
    def not_found_error(error):
        if is_api_path(request.path):
            return jsonify({"success": False, "error": "Not found"}), 404
        return render_template("errors/404.html"), 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        if is_api_path(request.path):
            return jsonify({"success": False, "error": "Method not allowed"}), 405
        return render_template("errors/404.html"), 405

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        original = getattr(error, "original_exception", None) or error
        app.logger.error(f"Unhandled error on {request.path}: {str(original)}", exc_info=original)
        if is_api_path(request.path):
            return jsonify({"success": False, "error": "Internal server error"}), 500
        detail = str(original) if app.debug else None
        return render_template("errors/500.html", detail=detail), 500


def create_app(config_name=None, overrides=None):
    """
    Application factory.

    ``config_name`` selects the configuration pair (development, testing,
    production) and defaults to FLASK_ENV. ``overrides`` is applied last.
    """
    flask_env = config_name or os.environ.get("FLASK_ENV", "development")

    # Validate environment variables (only in production)
    if flask_env == "production":
        validate_and_exit(flask_env)

    app = Flask(__name__)

    app_config, monitoring_config = get_config_objects(flask_env)
    app.config.from_object(app_config)
    app.config.from_object(monitoring_config)
    if overrides:
        app.config.update(overrides)

    # Initialize extensions
    db.init_app(app)
    init_session_auth(app)

    # Initialize logging before anything starts writing to app.logger
    setup_logging(app)

    init_routes(app)
    register_error_handlers(app)
    app.cli.add_command(importer_cli)

    with app.app_context():
        engine = db.engine
        if engine.url.drivername.startswith("sqlite"):
            event.listen(engine, "connect", _configure_sqlite_connection)
        # Wait for the store and create the tables only if not in testing mode
        if not app.config.get("TESTING", False):
            wait_for_database(app)
            db.create_all()

    return app


if __name__ == "__main__":
    # Use production-ready server configuration
    port = int(os.environ.get("PORT", 5000))
    create_app().run(host="0.0.0.0", port=port)
