"""
Service declarations.

A service type carries its service ID as a class-level marker. The marker is
inherited, so subclasses of a declared service resolve to the same ID unless
they declare their own.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Type, TypeVar

from kgtools.services.errors import InvalidServiceIdError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SERVICE_ID_ATTR = "__service_id__"

# Bumped whenever a class gains a service ID; locators drop their type cache when it moves.
_declaration_version = 0


def _validate_service_id(service_id: object) -> str:
    if not isinstance(service_id, str) or not service_id.strip():
        raise InvalidServiceIdError(f"Service ID must be a non-empty string, got {service_id!r}")
    return service_id


def declare_service(cls: Type[T], service_id: str) -> Type[T]:
    """
    Attach a service ID to ``cls``.

    Declaring the same class twice is allowed only with the same ID.
    """
    global _declaration_version
    if not isinstance(cls, type):
        raise TypeError(f"Only classes can be declared as services, got {cls!r}")
    service_id = _validate_service_id(service_id)
    existing = cls.__dict__.get(SERVICE_ID_ATTR)
    if existing is not None and existing != service_id:
        raise InvalidServiceIdError(
            f"Type {cls.__qualname__} is already declared with service ID '{existing}'"
        )
    if existing is None:
        setattr(cls, SERVICE_ID_ATTR, service_id)
        _declaration_version += 1
    logger.debug("SERVICE_DECLARED | id=%s | type=%s", service_id, cls.__qualname__)
    return cls


def service(service_id: str) -> Callable[[Type[T]], Type[T]]:
    """
    Class decorator declaring a service type.

        @service("logger")
        class Logger:
            ...
    """
    _validate_service_id(service_id)

    def decorator(cls: Type[T]) -> Type[T]:
        return declare_service(cls, service_id)

    return decorator


def declaration_version() -> int:
    return _declaration_version


def service_id_of(service_type: type) -> Optional[str]:
    """Return the service ID declared on ``service_type`` or one of its bases."""
    if not isinstance(service_type, type):
        return None
    for klass in service_type.__mro__:
        service_id = klass.__dict__.get(SERVICE_ID_ATTR)
        if service_id is not None:
            return service_id
    return None


def is_service(service_type: type) -> bool:
    return service_id_of(service_type) is not None


__all__ = ["declare_service", "declaration_version", "service", "service_id_of", "is_service", "SERVICE_ID_ATTR"]
