# servicemanager/service_manager.py

"""Registry of named services with factory and abstract-factory resolution."""

from typing import Any, Callable, Iterable, Mapping, Optional

from .config import settings
from .exceptions import InvalidServiceError, ServiceNotFoundError
from .interfaces import AbstractFactory
from .logging import get_logger

# Type alias for concrete factories
ServiceFactory = Callable[["ServiceManager", str], Any]


class ServiceManager:
    """Resolve services by exact name.

    Lookup order for ``get``: registered instance, registered factory, then
    abstract factories in registration order.
    """

    def __init__(
        self,
        services: Optional[Mapping[str, Any]] = None,
        factories: Optional[Mapping[str, ServiceFactory]] = None,
        abstract_factories: Optional[Iterable[AbstractFactory | type]] = None,
        shared_by_default: bool = True,
        config_service: Optional[str] = None,
    ):
        self._services: dict[str, Any] = {}
        self._factories: dict[str, ServiceFactory] = {}
        self._abstract_factories: list[AbstractFactory] = []
        self._shared: dict[str, bool] = {}
        self.shared_by_default = shared_by_default
        self.config_service = config_service or settings.config_service
        self.logger = get_logger(f"{__name__}.ServiceManager")

        for name, instance in (services or {}).items():
            self.set_service(name, instance)
        for name, factory in (factories or {}).items():
            self.set_factory(name, factory)
        for factory in abstract_factories or ():
            self.add_abstract_factory(factory)

    def set_service(self, name: str, instance: Any) -> None:
        """Register a ready-made instance under ``name``."""
        self._validate_name(name)
        self._services[name] = instance
        self.logger.debug("service.registered", name=name)

    def set_factory(self, name: str, factory: ServiceFactory) -> None:
        """Register a callable that builds the service on first ``get``."""
        self._validate_name(name)
        if not callable(factory):
            raise InvalidServiceError(f"Factory for {name!r} is not callable")
        self._factories[name] = factory
        self.logger.debug("factory.registered", name=name)

    def add_abstract_factory(self, factory: AbstractFactory | type) -> None:
        """Append an abstract factory; classes are instantiated without arguments."""
        if isinstance(factory, type):
            factory = factory()
        if not isinstance(factory, AbstractFactory):
            raise InvalidServiceError(
                f"{type(factory).__name__} does not provide can_create/create"
            )
        self._abstract_factories.append(factory)
        self.logger.debug(
            "abstract_factory.registered",
            factory=type(factory).__name__,
            abstract_factory_count=len(self._abstract_factories),
        )

    def set_shared(self, name: str, shared: bool) -> None:
        """Override whether the service built for ``name`` is cached."""
        self._shared[name] = shared

    def has(self, name: str) -> bool:
        """Check whether ``name`` can be resolved without building it."""
        if name in self._services or name in self._factories:
            return True
        return self._find_abstract_factory(name) is not None

    def get(self, name: str) -> Any:
        """Resolve ``name``.

        Raises:
            ServiceNotFoundError: If nothing can provide the service
        """
        if name in self._services:
            return self._services[name]

        if name in self._factories:
            instance = self._factories[name](self, name)
        else:
            factory = self._find_abstract_factory(name)
            if factory is None:
                raise ServiceNotFoundError(f"Unable to resolve service {name!r}")
            instance = factory.create(self, name)

        if self._shared.get(name, self.shared_by_default):
            self._services[name] = instance

        self.logger.debug("service.created", name=name, service_type=type(instance).__name__)
        return instance

    def get_global_config(self) -> Optional[Mapping[str, Any]]:
        """Return the application configuration, or None when it is not registered.

        Only concrete registrations are consulted; abstract factories usually
        read this configuration themselves.
        """
        if self.config_service not in self._services and self.config_service not in self._factories:
            return None
        return self.get(self.config_service)

    def _find_abstract_factory(self, name: str) -> Optional[AbstractFactory]:
        for factory in self._abstract_factories:
            if factory.can_create(self, name):
                return factory
        return None

    @staticmethod
    def _validate_name(name: str) -> None:
        if not isinstance(name, str) or not name:
            raise InvalidServiceError("Service name must be a non-empty string")
