import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("NUMERIC_WIRE_FORMAT", "binary")
    monkeypatch.delenv("NUMERIC_SQL_PRECISION", raising=False)
    monkeypatch.delenv("NUMERIC_SQL_SCALE", raising=False)

    from pgtypes.shared.config import get_settings

    get_settings.cache_clear()
