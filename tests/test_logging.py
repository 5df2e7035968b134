import json
import logging

import pytest

from nouasseur_app.utils.logging_config import JsonFormatter, setup_logging

pytestmark = pytest.mark.unit


def test_json_formatter_emits_one_object():
    record = logging.LogRecord("nouasseur_app.importer", logging.INFO, __file__, 12, "Imported %d rows", (3,), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "nouasseur_app.importer"
    assert payload["message"] == "Imported 3 rows"


def test_setup_logging_is_idempotent(app, tmp_path):
    app.config.update(
        ENABLE_CONSOLE_LOGGING=True,
        ENABLE_FILE_LOGGING=True,
        LOG_DIR=str(tmp_path / "logs"),
        LOG_FORMAT="json",
        LOG_LEVEL="info",
    )
    setup_logging(app)
    setup_logging(app)

    managed = [handler for handler in app.logger.handlers if getattr(handler, "_nouasseur_managed", False)]
    assert len(managed) == 2
    assert app.logger.level == logging.INFO
    assert (tmp_path / "logs" / "nouasseur.log").exists()

    app.config.update(ENABLE_CONSOLE_LOGGING=False, ENABLE_FILE_LOGGING=False)
    setup_logging(app)
