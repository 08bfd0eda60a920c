"""Exceptions raised by the service locator."""

from __future__ import annotations


def _name(service_type: object) -> str:
    return getattr(service_type, "__qualname__", repr(service_type))


class ServiceLocatorError(Exception):
    """Base class for all service locator failures."""


class NotAServiceError(ServiceLocatorError, TypeError):
    """Raised when a type carries no service declaration."""

    def __init__(self, service_type: type) -> None:
        self.service_type = service_type
        super().__init__(
            f"Type {_name(service_type)} is not a service. "
            "Decorate it with @service(<id>) or call declare_service()."
        )


class AlreadyBoundError(ServiceLocatorError):
    """Raised when binding to a service ID that already holds an instance."""

    def __init__(self, service_type: type, service_id: str) -> None:
        self.service_type = service_type
        self.service_id = service_id
        super().__init__(
            f"Cannot bind service of type {_name(service_type)}: "
            f"a service with ID '{service_id}' is already bound."
        )


class NullServiceError(ServiceLocatorError, ValueError):
    """Raised when ``None`` is passed as a service instance."""


class ServiceUnavailableError(ServiceLocatorError, LookupError):
    """Raised by ``require`` when a declared service has no bound instance."""

    def __init__(self, service_type: type, service_id: str) -> None:
        self.service_type = service_type
        self.service_id = service_id
        super().__init__(f"No service bound for type {_name(service_type)} (ID '{service_id}').")


class InvalidServiceIdError(ServiceLocatorError, ValueError):
    """Raised when a service ID is not a non-empty string."""


class LocatorNotInitializedError(ServiceLocatorError, RuntimeError):
    """Raised when the global locator is accessed before initialization."""


__all__ = [
    "ServiceLocatorError",
    "NotAServiceError",
    "AlreadyBoundError",
    "NullServiceError",
    "ServiceUnavailableError",
    "InvalidServiceIdError",
    "LocatorNotInitializedError",
]
