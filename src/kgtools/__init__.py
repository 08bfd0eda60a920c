"""
kgtools: service locator and small general-purpose helpers.
"""

from kgtools.services import (
    ServiceLocator,
    declare_service,
    get_locator,
    initialize_locator,
    service,
)

__version__ = "0.1.0"

__all__ = [
    "ServiceLocator",
    "service",
    "declare_service",
    "initialize_locator",
    "get_locator",
    "__version__",
]
