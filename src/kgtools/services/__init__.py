"""
Service locator: bind and fetch singleton-like services by declared ID.
"""

from .accessor import (
    get_locator,
    initialize_locator,
    initialize_locator_from_config,
    is_locator_initialized,
    reset_locator,
)
from .declaration import declare_service, is_service, service, service_id_of
from .errors import (
    AlreadyBoundError,
    InvalidServiceIdError,
    LocatorNotInitializedError,
    NotAServiceError,
    NullServiceError,
    ServiceLocatorError,
    ServiceUnavailableError,
)
from .registry import ServiceLocator

__all__ = [
    "ServiceLocator",
    "service",
    "declare_service",
    "service_id_of",
    "is_service",
    "initialize_locator",
    "initialize_locator_from_config",
    "get_locator",
    "is_locator_initialized",
    "reset_locator",
    "ServiceLocatorError",
    "NotAServiceError",
    "AlreadyBoundError",
    "NullServiceError",
    "ServiceUnavailableError",
    "InvalidServiceIdError",
    "LocatorNotInitializedError",
]
