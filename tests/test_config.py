from __future__ import annotations

import pytest

from app.core.config import Settings


def test_cors_accepts_comma_separated():
    s = Settings(CORS_ORIGINS="http://a.test, http://b.test")
    assert s.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_cors_accepts_json_list():
    s = Settings(CORS_ORIGINS='["http://a.test"]')
    assert s.CORS_ORIGINS == ["http://a.test"]


def test_defaults_validate():
    s = Settings()
    s.validate_at_startup()
    assert s.CACHE_TTL_SECONDS == 300


def test_startup_validation_collects_problems():
    s = Settings(APP_ENV="prod", CORS_ORIGINS="", CACHE_TTL_SECONDS=-1, LOG_LEVEL="chatty")
    with pytest.raises(RuntimeError) as exc:
        s.validate_at_startup()
    msg = str(exc.value)
    assert "CACHE_TTL_SECONDS" in msg
    assert "LOG_LEVEL" in msg
    assert "CORS_ORIGINS" in msg
