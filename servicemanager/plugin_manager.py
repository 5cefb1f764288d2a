# servicemanager/plugin_manager.py

"""Base class for managers that build plugins from a name and an options mapping."""

from typing import Any, ClassVar, Mapping, Optional

from .exceptions import InvalidPluginError, ServiceNotFoundError
from .logging import get_logger


class AbstractPluginManager:
    """Build plugins by case-insensitive name.

    Subclasses declare ``invokables`` (name -> class), ``instance_of`` (the
    type every plugin must satisfy) and ``invalid_plugin_error``.
    """

    invokables: ClassVar[dict[str, type]] = {}
    instance_of: ClassVar[type] = object
    invalid_plugin_error: ClassVar[type[Exception]] = InvalidPluginError

    def __init__(self, services: Optional[Any] = None):
        self.services = services
        self._invokables: dict[str, type] = {
            self.canonical_name(name): cls for name, cls in self.invokables.items()
        }
        self._instances: dict[str, Any] = {}
        self.logger = get_logger(f"{__name__}.{type(self).__name__}")

    @staticmethod
    def canonical_name(name: str) -> str:
        return name.strip().lower()

    def set_invokable(self, name: str, cls: type) -> None:
        """Map ``name`` to a class constructed with the options mapping."""
        self._invokables[self.canonical_name(name)] = cls

    def set_service(self, name: str, instance: Any) -> None:
        """Register a prebuilt plugin; ``build`` returns it as is."""
        self.validate(instance)
        self._instances[self.canonical_name(name)] = instance

    def has(self, name: str) -> bool:
        if not isinstance(name, str):
            return False
        key = self.canonical_name(name)
        return key in self._instances or key in self._invokables

    def build(self, name: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        """Return the plugin registered as ``name``.

        Raises:
            ServiceNotFoundError: If ``name`` is unknown
            InvalidPluginError: If the result does not satisfy ``instance_of``
        """
        key = self.canonical_name(name)
        if key in self._instances:
            return self._instances[key]

        cls = self._invokables.get(key)
        if cls is None:
            raise ServiceNotFoundError(
                f"{type(self).__name__} is unable to resolve plugin {name!r}"
            )

        plugin = cls(dict(options or {}))
        self.validate(plugin)

        self.logger.debug("plugin.built", name=name, plugin_type=cls.__name__)
        return plugin

    get = build

    def validate(self, plugin: Any) -> None:
        if not isinstance(plugin, self.instance_of):
            raise self.invalid_plugin_error(
                f"Plugin of type {type(plugin).__name__} is invalid; "
                f"must implement {self.instance_of.__name__}"
            )
