import pytest

from config import (
    DevelopmentConfig,
    DevelopmentMonitoringConfig,
    ProductionConfig,
    TestingConfig,
    TestingMonitoringConfig,
    get_config_objects,
)
from config.base import _coerce_bool, _coerce_int
from config.validation import validate_and_exit, validate_environment

pytestmark = pytest.mark.unit


class TestConfigSelection:
    def test_known_environments(self):
        assert get_config_objects("testing") == (TestingConfig, TestingMonitoringConfig)
        assert get_config_objects("production")[0] is ProductionConfig

    def test_unknown_environment_falls_back_to_development(self):
        assert get_config_objects("staging") == (DevelopmentConfig, DevelopmentMonitoringConfig)

    def test_testing_defaults(self):
        assert TestingConfig.TESTING is True
        assert TestingConfig.AUTH_COOKIE_NAME == "auth"
        assert TestingConfig.AUTH_TOKEN_MAX_AGE == 86400
        assert TestingConfig.AUTH_COOKIE_SECURE is False
        assert TestingConfig.LISTING_MAX_PAGE_SIZE == 100


class TestCoercion:
    @pytest.mark.parametrize(
        "raw, expected",
        [("1", True), ("TRUE", True), (" yes ", True), ("off", False), ("0", False), (None, False), ("maybe", False)],
    )
    def test_coerce_bool(self, raw, expected):
        assert _coerce_bool(raw) is expected

    def test_coerce_bool_default(self):
        assert _coerce_bool(None, default=True) is True
        assert _coerce_bool("garbage", default=True) is True

    def test_coerce_int(self):
        assert _coerce_int("42", 5) == 42
        assert _coerce_int("abc", 5) == 5
        assert _coerce_int(None, 5) == 5
        assert _coerce_int("10", 5, minimum=60) == 5
        assert _coerce_int("500", 5, maximum=100) == 5


class TestEnvironmentValidation:
    def test_non_production_is_always_valid(self, monkeypatch):
        monkeypatch.delenv("SECRET_KEY", raising=False)
        monkeypatch.delenv("DATABASE_URL", raising=False)
        assert validate_environment("development") == (True, [])

    def test_production_requires_secret_and_database(self, monkeypatch):
        monkeypatch.delenv("SECRET_KEY", raising=False)
        monkeypatch.delenv("DATABASE_URL", raising=False)
        is_valid, errors = validate_environment("production")
        assert not is_valid
        assert any("SECRET_KEY" in error for error in errors)
        assert any("DATABASE_URL" in error for error in errors)

    def test_production_rejects_placeholder_secret_and_insecure_cookie(self, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "changeme")
        monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/nouasseur")
        monkeypatch.setenv("AUTH_COOKIE_SECURE", "false")
        monkeypatch.setenv("AUTH_TOKEN_MAX_AGE", "soon")
        _, errors = validate_environment("production")
        assert len(errors) == 3

    def test_production_valid(self, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "a" * 64)
        monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/nouasseur")
        monkeypatch.delenv("AUTH_COOKIE_SECURE", raising=False)
        monkeypatch.delenv("AUTH_TOKEN_MAX_AGE", raising=False)
        assert validate_environment("production") == (True, [])

    def test_validate_and_exit(self, monkeypatch, capsys):
        monkeypatch.delenv("SECRET_KEY", raising=False)
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(SystemExit) as excinfo:
            validate_and_exit("production")
        assert excinfo.value.code == 1
        assert "ENVIRONMENT VALIDATION FAILED" in capsys.readouterr().err
