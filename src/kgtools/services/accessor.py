"""
Process-wide access to a single ServiceLocator.

The first call to ``initialize_locator`` installs the locator; later calls are
no-ops that return it.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from kgtools.config.settings import KGToolsConfig
from kgtools.services.errors import LocatorNotInitializedError
from kgtools.services.registry import ServiceLocator
from kgtools.utils.logging import setup_logging

logger = logging.getLogger(__name__)

_locator: Optional[ServiceLocator] = None
_init_lock = threading.Lock()


def initialize_locator(locator: Optional[ServiceLocator] = None) -> ServiceLocator:
    global _locator
    with _init_lock:
        if _locator is not None:
            if locator is not None and locator is not _locator:
                logger.warning("SERVICE_LOCATOR_DISCARDED | installed=%r | discarded=%r", _locator, locator)
            return _locator
        _locator = locator if locator is not None else ServiceLocator()
        logger.info("SERVICE_LOCATOR_INIT | locator=%r", _locator)
        return _locator


def initialize_locator_from_config(config: KGToolsConfig) -> ServiceLocator:
    """Apply the logging section of ``config`` and install a locator built from its locator section."""
    setup_logging(config.logging.level)
    return initialize_locator(ServiceLocator.from_config(config.locator))


def get_locator() -> ServiceLocator:
    if _locator is None:
        raise LocatorNotInitializedError("Service locator not initialised; call initialize_locator() first")
    return _locator


def is_locator_initialized() -> bool:
    return _locator is not None


def reset_locator() -> None:
    """Return to the uninitialized state. Intended for tests."""
    global _locator
    with _init_lock:
        _locator = None


__all__ = ["initialize_locator", "initialize_locator_from_config", "get_locator", "is_locator_initialized", "reset_locator"]
