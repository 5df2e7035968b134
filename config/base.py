# config/base.py
import os
from datetime import timedelta


def _coerce_bool(value, default=False):
    """Convert environment-style truthy/falsey values to bool."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    value_str = str(value).strip().lower()
    if value_str in {"1", "true", "yes", "on"}:
        return True
    if value_str in {"0", "false", "no", "off"}:
        return False
    return default


def _coerce_int(value, default, *, minimum=None, maximum=None):
    """Parse an integer environment value, falling back to ``default`` when invalid."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if minimum is not None and number < minimum:
        return default
    if maximum is not None and number > maximum:
        return default
    return number


def _coerce_float(value, default, *, minimum=0.0):
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if number < minimum:
        return default
    return number


class Config:
    # SECRET_KEY signs the auth cookie token; it must be set in production.
    # Generate with: python -c "import secrets; print(secrets.token_hex(32))"
    _flask_env = os.environ.get("FLASK_ENV", "development")
    _is_testing = _flask_env == "testing"
    _is_production = _flask_env == "production"

    SECRET_KEY = os.environ.get("SECRET_KEY")

    if not SECRET_KEY and _is_production:
        raise ValueError(
            "SECRET_KEY environment variable is required in production. "
            'Generate with: python -c "import secrets; print(secrets.token_hex(32))"'
        )

    if not SECRET_KEY and not _is_testing:
        import warnings

        warnings.warn(
            "SECRET_KEY not set. Using default for development only. "
            "This is insecure and should not be used in production. "
            "Set SECRET_KEY environment variable or generate with: "
            'python -c "import secrets; print(secrets.token_hex(32))"',
            UserWarning,
        )
        SECRET_KEY = "dev-secret-key-change-in-production"

    if not SECRET_KEY:
        SECRET_KEY = "test-secret-key-placeholder"

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {}

    # Store connection at start-up
    DB_CONNECT_RETRIES = _coerce_int(os.environ.get("DB_CONNECT_RETRIES"), 5, minimum=1)
    DB_CONNECT_RETRY_DELAY = _coerce_float(os.environ.get("DB_CONNECT_RETRY_DELAY"), 2.0)

    # Auth cookie
    AUTH_COOKIE_NAME = os.environ.get("AUTH_COOKIE_NAME", "auth")
    AUTH_TOKEN_MAX_AGE = _coerce_int(os.environ.get("AUTH_TOKEN_MAX_AGE"), 86400, minimum=60)
    AUTH_COOKIE_SECURE = _coerce_bool(os.environ.get("AUTH_COOKIE_SECURE"), default=False)
    AUTH_DEFAULT_REDIRECT = os.environ.get("AUTH_DEFAULT_REDIRECT", "/members")

    # Listing
    LISTING_MAX_PAGE_SIZE = _coerce_int(os.environ.get("LISTING_MAX_PAGE_SIZE"), 100, minimum=1)
    HOME_UPCOMING_EVENTS_LIMIT = _coerce_int(os.environ.get("HOME_UPCOMING_EVENTS_LIMIT"), 8, minimum=1)

    # Importer
    IMPORTER_BATCH_SIZE = _coerce_int(os.environ.get("IMPORTER_BATCH_SIZE"), 100, minimum=1)

    # Flask's own session cookie is unused for auth but keep it locked down
    PERMANENT_SESSION_LIFETIME = timedelta(days=1)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"

    # The JSON API forms run without CSRF tokens; page forms post to the API
    WTF_CSRF_ENABLED = False


class DevelopmentConfig(Config):
    DEBUG = True
    _config_dir = os.path.dirname(os.path.abspath(__file__))
    _project_root = os.path.dirname(_config_dir)
    instance_path = os.path.join(_project_root, "instance")

    if not os.path.exists(instance_path):
        os.makedirs(instance_path, exist_ok=True)

    # SQLite URI format: sqlite:///absolute/path (3 slashes for absolute path)
    db_path = os.path.join(instance_path, "nouasseur_dev.db")
    db_path_normalized = db_path.replace("\\", "/")
    db_uri = f"sqlite:///{db_path_normalized}"

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", db_uri)
    SQLALCHEMY_ECHO = _coerce_bool(os.environ.get("SQLALCHEMY_ECHO"), default=False)
    if SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
        SQLALCHEMY_ENGINE_OPTIONS = {
            "connect_args": {
                "check_same_thread": False,
                "timeout": 5,
            }
        }
    else:
        SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = os.environ.get("SECRET_KEY", "test-secret-key-for-testing-only")
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ECHO = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "connect_args": {
            "check_same_thread": False,
            "timeout": 5,
        }
    }
    DB_CONNECT_RETRIES = 1
    DB_CONNECT_RETRY_DELAY = 0


class ProductionConfig(Config):
    DEBUG = False
    uri = os.environ.get("DATABASE_URL")
    if uri and uri.startswith("postgres://"):
        uri = uri.replace("postgres://", "postgresql://", 1)
    SQLALCHEMY_DATABASE_URI = uri
    SQLALCHEMY_ECHO = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "connect_args": {"connect_timeout": 5},
    }
    SESSION_COOKIE_SECURE = True
    AUTH_COOKIE_SECURE = _coerce_bool(os.environ.get("AUTH_COOKIE_SECURE"), default=True)
