"""
Tests for the application config.
"""

import importlib

import AlfredChat.config


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ALFRED_ENV", "Production")
    monkeypatch.setenv("ALFRED_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("ALFRED_LOG_DIR", str(tmp_path))

    module = importlib.reload(AlfredChat.config)
    try:
        assert module.Config.get_config() == {
            "ENV": "production",
            "LOG_LEVEL": "WARNING",
            "LOG_DIR": str(tmp_path),
        }
    finally:
        monkeypatch.undo()
        importlib.reload(AlfredChat.config)


def test_defaults(monkeypatch):
    for name in ("ALFRED_ENV", "ALFRED_LOG_LEVEL", "ALFRED_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)

    module = importlib.reload(AlfredChat.config)

    assert module.config.ENV == "development"
    assert module.config.LOG_LEVEL is None
    assert module.config.LOG_DIR is None
