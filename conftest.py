# conftest.py

import os

import pytest
from werkzeug.security import generate_password_hash

# Set testing environment BEFORE importing app so the config classes pick it up
os.environ["FLASK_ENV"] = "testing"

from app import create_app  # noqa: E402
from nouasseur_app.models import DirectoryEntry, Event, Member, User, db  # noqa: E402

TEST_PASSWORD = "testpass123"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without HTTP round-trips")
    config.addinivalue_line("markers", "integration: tests that exercise routes end to end")


@pytest.fixture(scope="function")
def app(tmp_path):
    """
    Create a Flask application backed by a throwaway SQLite file.

    No application context is left pushed while the test runs: Flask-Login
    caches the current identity on ``g``, so every request made through the
    test client must get a fresh context. Use the ``app_ctx`` fixture or
    ``with app.app_context()`` for direct database work.
    """
    flask_app = create_app(
        "testing",
        overrides={
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'nouasseur_test.db'}",
            "SECRET_KEY": "test-secret-key-for-testing-only",
        },
    )

    with flask_app.app_context():
        db.create_all()

    yield flask_app

    with flask_app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def app_ctx(app):
    """Push an application context for tests that talk to the database directly"""
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Create a test client for the Flask application"""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Create a test CLI runner for the Flask application"""
    return app.test_cli_runner()


def _create(app, model, **values):
    with app.app_context():
        record = model(**values)
        db.session.add(record)
        db.session.commit()
        return record.id


@pytest.fixture
def make_member(app):
    """Factory inserting a member; returns the new id"""

    def factory(**values):
        return _create(app, Member, **values)

    return factory


@pytest.fixture
def make_event(app):
    """Factory inserting an event; returns the new id"""

    def factory(**values):
        values.setdefault("event_name", "Reunion")
        return _create(app, Event, **values)

    return factory


@pytest.fixture
def make_directory_entry(app):
    """Factory inserting a directory entry; returns the new id"""

    def factory(**values):
        values.setdefault("name", "Base Library")
        return _create(app, DirectoryEntry, **values)

    return factory


@pytest.fixture
def test_user(app):
    """Create a stored user and return its public fields"""
    user_id = _create(
        app,
        User,
        username="testuser",
        email="testuser@nouasseur.org",
        password_hash=generate_password_hash(TEST_PASSWORD),
    )
    return {"id": user_id, "username": "testuser", "email": "testuser@nouasseur.org", "password": TEST_PASSWORD}


@pytest.fixture
def login(client):
    """Log in through the API so the client's cookie jar holds the auth cookie"""

    def _login(username="testuser", password=TEST_PASSWORD):
        return client.post("/api/users/login", json={"username": username, "password": password})

    return _login


@pytest.fixture
def auth_client(client, test_user, login):
    """Test client already carrying a valid auth cookie"""
    response = login(test_user["username"], test_user["password"])
    assert response.status_code == 200
    return client
