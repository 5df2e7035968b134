# nouasseur_app/utils/database.py

import time

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from nouasseur_app.models import db


def check_database():
    """Probe store connectivity; raises SQLAlchemyError when unreachable"""
    db.session.execute(text("SELECT 1"))
    return True


def wait_for_database(app, retries=None, delay=None, sleep=time.sleep):
    """
    Try to connect to the store a fixed number of times before giving up.

    Exits the process with status 1 once the retry budget is exhausted. Must be
    called inside an application context.
    """
    retries = retries if retries is not None else int(app.config.get("DB_CONNECT_RETRIES", 5))
    retries = max(1, retries)
    delay = delay if delay is not None else float(app.config.get("DB_CONNECT_RETRY_DELAY", 2))

    for attempt in range(1, retries + 1):
        try:
            app.logger.info(f"Attempting to connect to database (attempt {attempt}/{retries})...")
            with db.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            app.logger.info("Successfully connected to the database")
            return True
        except SQLAlchemyError as e:
            app.logger.error(f"Failed to connect to database (attempt {attempt}/{retries}): {str(e)}")
            if attempt < retries:
                app.logger.info(f"Retrying in {delay} seconds...")
                sleep(delay)

    app.logger.critical("Maximum number of connection attempts reached. Exiting.")
    raise SystemExit(1)
