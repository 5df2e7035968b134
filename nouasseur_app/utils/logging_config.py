# nouasseur_app/utils/logging_config.py

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

from flask.logging import default_handler

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Loggers configured alongside app.logger so importer/module logs share handlers
PACKAGE_LOGGERS = ("nouasseur_app",)


class JsonFormatter(logging.Formatter):
    """One JSON object per line"""

    def format(self, record):
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _build_formatter(app):
    if str(app.config.get("LOG_FORMAT", "text")).lower() == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT)


def _remove_managed_handlers(logger):
    for handler in list(logger.handlers):
        if getattr(handler, "_nouasseur_managed", False):
            logger.removeHandler(handler)
            handler.close()


def setup_logging(app):
    """Configure console/file handlers on app.logger; safe to call repeatedly"""
    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = _build_formatter(app)

    handlers = []
    if app.config.get("ENABLE_CONSOLE_LOGGING", True):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if app.config.get("ENABLE_FILE_LOGGING", False):
        log_dir = app.config.get("LOG_DIR", "logs")
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, app.config.get("LOG_FILE_NAME", "nouasseur.log")),
            maxBytes=int(app.config.get("LOG_FILE_MAX_BYTES", 10485760)),
            backupCount=int(app.config.get("LOG_FILE_BACKUP_COUNT", 10)),
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    loggers = [app.logger] + [logging.getLogger(name) for name in PACKAGE_LOGGERS]
    for logger in loggers:
        _remove_managed_handlers(logger)
        logger.setLevel(level)
        for handler in handlers:
            handler._nouasseur_managed = True
            handler.setLevel(level)
            logger.addHandler(handler)

    if handlers:
        app.logger.removeHandler(default_handler)

    app.logger.debug(f"Logging configured at {level_name} with {len(handlers)} handler(s)")
    return app.logger
