import logging

import pytest

from kgtools.config import KGToolsConfig, LocatorConfig, LoggingConfig
from kgtools.services import (
    LocatorNotInitializedError,
    ServiceLocator,
    accessor,
    get_locator,
    initialize_locator,
    initialize_locator_from_config,
    is_locator_initialized,
    service,
)


@service("scoreboard")
class Scoreboard:
    pass


def test_get_locator_before_initialization_fails():
    assert is_locator_initialized() is False
    with pytest.raises(LocatorNotInitializedError):
        get_locator()


def test_initialize_creates_default_locator():
    locator = initialize_locator()
    assert isinstance(locator, ServiceLocator)
    assert is_locator_initialized() is True
    assert get_locator() is locator


def test_first_initializer_wins(caplog):
    first = ServiceLocator()
    second = ServiceLocator()
    assert initialize_locator(first) is first
    with caplog.at_level(logging.WARNING, logger="kgtools.services.accessor"):
        assert initialize_locator(second) is first
    assert "SERVICE_LOCATOR_DISCARDED" in caplog.text
    assert initialize_locator() is first
    assert get_locator() is first


def test_bindings_survive_repeated_initialization():
    scoreboard = initialize_locator().bind(Scoreboard())
    initialize_locator()
    assert get_locator().get(Scoreboard) is scoreboard


def test_initialize_from_config_applies_logging_and_locator_settings(monkeypatch):
    levels = []
    monkeypatch.setattr(accessor, "setup_logging", lambda level: levels.append(level))
    config = KGToolsConfig(
        logging=LoggingConfig(level="ERROR"),
        locator=LocatorConfig(thread_safe=False, log_missing=False),
    )

    locator = initialize_locator_from_config(config)

    assert levels == ["ERROR"]
    assert get_locator() is locator
    assert locator.thread_safe is False
    assert locator.log_missing is False
