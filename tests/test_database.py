from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from nouasseur_app.models import db
from nouasseur_app.utils.database import check_database, wait_for_database

pytestmark = pytest.mark.unit


def _unreachable(*args, **kwargs):
    raise OperationalError("SELECT 1", {}, Exception("connection refused"))


class TestWaitForDatabase:
    def test_succeeds_on_first_attempt(self, app_ctx):
        sleeps = []
        assert wait_for_database(app_ctx, retries=3, delay=1, sleep=sleeps.append) is True
        assert sleeps == []

    def test_exits_after_retry_budget(self, app_ctx):
        sleeps = []
        with patch.object(type(db.engine), "connect", side_effect=_unreachable):
            with pytest.raises(SystemExit) as excinfo:
                wait_for_database(app_ctx, retries=3, delay=0.5, sleep=sleeps.append)
        assert excinfo.value.code == 1
        assert sleeps == [0.5, 0.5]

    def test_recovers_after_a_failure(self, app_ctx):
        real_connect = type(db.engine).connect
        attempts = []

        def flaky(engine, *args, **kwargs):
            attempts.append(1)
            if len(attempts) == 1:
                _unreachable()
            return real_connect(engine, *args, **kwargs)

        sleeps = []
        with patch.object(type(db.engine), "connect", flaky):
            assert wait_for_database(app_ctx, retries=3, delay=2, sleep=sleeps.append) is True
        assert len(attempts) == 2
        assert sleeps == [2]

    def test_zero_retries_still_tries_once(self, app_ctx):
        attempts = []

        def refuse(*args, **kwargs):
            attempts.append(1)
            _unreachable()

        with patch.object(type(db.engine), "connect", side_effect=refuse):
            with pytest.raises(SystemExit):
                wait_for_database(app_ctx, retries=0, sleep=lambda seconds: None)
        assert attempts == [1]

    def test_reads_budget_from_config(self, app_ctx):
        app_ctx.config["DB_CONNECT_RETRIES"] = 2
        app_ctx.config["DB_CONNECT_RETRY_DELAY"] = 7
        sleeps = []
        with patch.object(type(db.engine), "connect", side_effect=_unreachable):
            with pytest.raises(SystemExit):
                wait_for_database(app_ctx, sleep=sleeps.append)
        assert sleeps == [7.0]


def test_check_database(app_ctx):
    assert check_database() is True
