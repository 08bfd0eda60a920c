import logging

from kgtools.utils import logging as kg_logging


def _capture_basic_config(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


def test_setup_logging_uses_requested_level(monkeypatch):
    monkeypatch.delenv("KGTOOLS_LOG_LEVEL", raising=False)
    calls = _capture_basic_config(monkeypatch)
    kg_logging.setup_logging("debug")
    assert calls[0]["level"] == logging.DEBUG
    assert calls[0]["format"] == kg_logging.LOG_FORMAT


def test_env_overrides_level(monkeypatch):
    monkeypatch.setenv("KGTOOLS_LOG_LEVEL", "error")
    calls = _capture_basic_config(monkeypatch)
    kg_logging.setup_logging("DEBUG")
    assert calls[0]["level"] == logging.ERROR


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.delenv("KGTOOLS_LOG_LEVEL", raising=False)
    calls = _capture_basic_config(monkeypatch)
    kg_logging.setup_logging("chatty")
    assert calls[0]["level"] == logging.INFO
