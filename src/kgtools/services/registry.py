from __future__ import annotations

import copy
import logging
import threading
from contextlib import nullcontext
from typing import Any, ContextManager, Dict, List, Optional, Tuple, Type, TypeVar

from kgtools.config.settings import LocatorConfig
from kgtools.services.declaration import declaration_version, service_id_of
from kgtools.services.errors import (
    AlreadyBoundError,
    NotAServiceError,
    NullServiceError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _type_name(service_type: type) -> str:
    return f"{service_type.__module__}.{service_type.__qualname__}"


class ServiceLocator:
    """
    Directory of singleton-like services keyed by their declared service ID.

    Only one instance can be bound per service ID at a time. Lookups by type
    are memoized in a type -> service ID cache.
    """

    def __init__(self, *, thread_safe: bool = True, log_missing: bool = True) -> None:
        self.thread_safe = thread_safe
        self.log_missing = log_missing
        self._lock: Optional[threading.RLock] = threading.RLock() if thread_safe else None
        self._services: Dict[str, object] = {}
        self._type_to_service_id: Dict[type, str] = {}
        self._cache_version = declaration_version()
        self._setup()

    @classmethod
    def from_config(cls, config: LocatorConfig) -> "ServiceLocator":
        return cls(thread_safe=config.thread_safe, log_missing=config.log_missing)

    def _setup(self) -> None:
        """Hook for subclasses that need extra state; runs once at construction."""

    def _guard(self) -> ContextManager[Any]:
        return self._lock if self._lock is not None else nullcontext()

    def _resolve_service_id(self, service_type: type) -> str:
        version = declaration_version()
        if version != self._cache_version:
            self._type_to_service_id.clear()
            self._cache_version = version
        service_id = self._type_to_service_id.get(service_type)
        if service_id is not None:
            return service_id
        service_id = service_id_of(service_type)
        if service_id is None:
            raise NotAServiceError(service_type)
        self._type_to_service_id[service_type] = service_id
        return service_id

    def bind(self, instance: T, allow_override: bool = False) -> T:
        """
        Bind ``instance`` under the service ID declared on its type.

        Raises AlreadyBoundError if the ID is taken and ``allow_override`` is False.
        """
        if instance is None:
            raise NullServiceError("Cannot bind None as a service instance")
        service_type = type(instance)
        with self._guard():
            service_id = self._resolve_service_id(service_type)
            existing = self._services.get(service_id)
            if existing is not None and not allow_override:
                raise AlreadyBoundError(service_type, service_id)
            self._type_to_service_id[service_type] = service_id
            self._services[service_id] = instance
        if existing is not None:
            logger.info(
                "SERVICE_REBIND | id=%s | type=%s | replaced=%s",
                service_id,
                _type_name(service_type),
                _type_name(type(existing)),
            )
        else:
            logger.debug("SERVICE_BIND | id=%s | type=%s", service_id, _type_name(service_type))
        return instance

    def bind_from_template(self, template: Any, allow_override: bool = False, **kwargs: Any) -> Any:
        """
        Build a new service from ``template`` and bind it.

        A class template is instantiated with ``kwargs``; any other object is
        treated as a prototype and deep-copied.
        """
        if template is None:
            raise NullServiceError("Cannot bind a service from a None template")
        if isinstance(template, type):
            instance = template(**kwargs)
        else:
            if kwargs:
                raise TypeError("Keyword arguments are only supported for class templates")
            instance = copy.deepcopy(template)
        return self.bind(instance, allow_override=allow_override)

    def _lookup(self, service_type: type) -> Tuple[str, Optional[object]]:
        with self._guard():
            service_id = self._resolve_service_id(service_type)
            return service_id, self._services.get(service_id)

    def get(self, service_type: Type[T]) -> Optional[T]:
        """Return the service bound for ``service_type`` or None if none is bound."""
        service_id, instance = self._lookup(service_type)
        if instance is None or not isinstance(instance, service_type):
            if self.log_missing:
                logger.error(
                    "SERVICE_UNAVAILABLE | id=%s | type=%s | bound=%s",
                    service_id,
                    _type_name(service_type),
                    _type_name(type(instance)) if instance is not None else None,
                )
            return None
        return instance

    def require(self, service_type: Type[T]) -> T:
        service_id, instance = self._lookup(service_type)
        if instance is None or not isinstance(instance, service_type):
            raise ServiceUnavailableError(service_type, service_id)
        return instance

    def has(self, service_type: type) -> bool:
        with self._guard():
            service_id = self._resolve_service_id(service_type)
            return service_id in self._services

    def remove(self, service_type: Type[T]) -> Optional[T]:
        """
        Unbind the service registered under ``service_type``'s ID.

        Returns the removed instance, or None if nothing was bound. The type
        cache is left intact.
        """
        with self._guard():
            service_id = self._resolve_service_id(service_type)
            instance = self._services.pop(service_id, None)
        if instance is not None:
            logger.debug("SERVICE_REMOVE | id=%s | type=%s", service_id, _type_name(type(instance)))
        return instance

    def clear(self) -> None:
        with self._guard():
            self._services.clear()
            self._type_to_service_id.clear()
        logger.debug("SERVICE_LOCATOR_CLEARED")

    def service_ids(self) -> List[str]:
        with self._guard():
            return list(self._services)

    def __len__(self) -> int:
        return len(self._services)

    def __contains__(self, service_id: object) -> bool:
        return service_id in self._services

    def describe(self) -> str:
        with self._guard():
            services = list(self._services.items())
            cached = list(self._type_to_service_id.items())
        lines = [f"ServiceLocator: {len(services)} Services"]
        lines.extend(f"{service_id} - {instance}" for service_id, instance in services)
        lines.append("Service Types")
        lines.extend(
            f"Type:{_type_name(service_type)} - Service ID: {service_id}" for service_type, service_id in cached
        )
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"ServiceLocator(services={len(self._services)}, thread_safe={self.thread_safe})"


__all__ = ["ServiceLocator"]
