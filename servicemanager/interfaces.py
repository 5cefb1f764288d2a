# servicemanager/interfaces.py

"""Narrow interfaces consumed by factories plugged into a ServiceManager."""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class ServiceLocator(Protocol):
    """Name-to-instance resolution surface."""

    def has(self, name: str) -> bool: ...

    def get(self, name: str) -> Any: ...

    def get_global_config(self) -> Optional[Mapping[str, Any]]: ...


@runtime_checkable
class AbstractFactory(Protocol):
    """Fallback resolution strategy, tried only when no concrete registration exists."""

    def can_create(self, services: ServiceLocator, requested_name: str) -> bool: ...

    def create(self, services: ServiceLocator, requested_name: str) -> Any: ...
