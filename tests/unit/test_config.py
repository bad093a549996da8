# tests/unit/test_config.py

import importlib

import app.config


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://api.example.com/ ")
    monkeypatch.setenv("REDIRECT_DELAY_MS", "500")
    monkeypatch.setenv("MAINTENANCE_MODE", "1")
    cfg = importlib.reload(app.config)
    try:
        assert cfg.API_BASE_URL == "https://api.example.com"
        assert cfg.REDIRECT_DELAY_MS == 500
        assert cfg.MAINTENANCE is True
    finally:
        monkeypatch.undo()
        importlib.reload(app.config)


def test_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("API_TIMEOUT", "soon")
    assert app.config._env_float("API_TIMEOUT", 12.0) == 12.0
    monkeypatch.setenv("API_TIMEOUT", "")
    assert app.config._env_float("API_TIMEOUT", 12.0) == 12.0
