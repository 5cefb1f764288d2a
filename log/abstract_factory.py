# log/abstract_factory.py

"""Build named loggers from the ``log`` section of the application configuration.

Registered as an abstract factory, this lets an application declare several
loggers in configuration and fetch each one by name from the service manager::

    {
        "log": {
            "Application.Frontend": {
                "writers": [{"name": "stream", "options": {"stream": "app.log"}}],
            },
            "Application.Audit": {
                "writers": [{"name": "db", "options": {"db": "Db.Logger", "table": "audit"}}],
            },
        }
    }

Writer options naming another service (the ``db`` option of ``db`` writers)
are swapped for the resolved service before the logger is constructed.
"""

import threading
from typing import Any, ClassVar, Mapping, Optional

from servicemanager.config import settings
from servicemanager.exceptions import ServiceNotFoundError
from servicemanager.interfaces import ServiceLocator
from servicemanager.logging import get_logger

from .logger import Logger

# Writer name (lower-case) -> options that hold service names
SERVICE_REFERENCES: dict[str, tuple[str, ...]] = {"db": ("db",)}


def _copy_structure(value: Any) -> Any:
    """Copy nested mappings and lists; leaf values are shared."""
    if isinstance(value, Mapping):
        return {key: _copy_structure(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy_structure(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_copy_structure(item) for item in value)
    return value


def resolve_references(
    spec: Mapping[str, Any],
    services: ServiceLocator,
    reference_options: Optional[Mapping[str, tuple[str, ...]]] = None,
) -> dict[str, Any]:
    """Return a copy of ``spec`` with service-name writer options resolved.

    ``reference_options`` maps a lower-cased writer name to the option keys
    holding service names. An option is replaced only when it is a string
    naming a registered service; anything else is left as written.
    """
    if reference_options is None:
        reference_options = SERVICE_REFERENCES

    resolved = _copy_structure(spec)
    writers = resolved.get("writers")
    if not isinstance(writers, (list, tuple)):
        return resolved

    for writer in writers:
        if not isinstance(writer, dict):
            continue
        name = writer.get("name")
        if not isinstance(name, str):
            continue
        keys = reference_options.get(name.lower())
        if not keys:
            continue
        options = writer.get("options")
        if not isinstance(options, dict):
            continue

        for key in keys:
            service_name = options.get(key)
            if not isinstance(service_name, str):
                continue
            if not services.has(service_name):
                continue
            options[key] = services.get(service_name)

    return resolved


class LoggerAbstractServiceFactory:
    """Abstract factory creating a Logger for each name under the ``log`` config key.

    The logger table is read from the global configuration once per factory
    instance and cached; loggers themselves are built anew on every ``create``.
    """

    reference_options: ClassVar[dict[str, tuple[str, ...]]] = SERVICE_REFERENCES

    def __init__(
        self,
        config_key: Optional[str] = None,
        writer_manager_service: Optional[str] = None,
        processor_manager_service: Optional[str] = None,
    ):
        self.config_key = config_key or settings.config_key
        self.writer_manager_service = writer_manager_service or settings.writer_manager_service
        self.processor_manager_service = (
            processor_manager_service or settings.processor_manager_service
        )
        self._config: Optional[dict[str, Any]] = None
        self._config_lock = threading.Lock()
        self._loading = threading.local()
        self.logger = get_logger(f"{__name__}.LoggerAbstractServiceFactory")

    def get_config(self, services: ServiceLocator) -> dict[str, Any]:
        """Return the logger table, reading it from ``services`` on first use.

        Missing or malformed configuration yields an empty table.
        """
        if self._config is not None:
            return self._config

        # The registry may consult this factory while building its configuration.
        if getattr(self._loading, "active", False):
            return {}

        with self._config_lock:
            if self._config is None:
                self._loading.active = True
                try:
                    self._config = self._load_config(services)
                finally:
                    self._loading.active = False
                self.logger.debug(
                    "config.loaded",
                    config_key=self.config_key,
                    logger_count=len(self._config),
                )
        return self._config

    def _load_config(self, services: ServiceLocator) -> dict[str, Any]:
        global_config = services.get_global_config()
        if not isinstance(global_config, Mapping):
            return {}

        table = global_config.get(self.config_key)
        if not isinstance(table, Mapping):
            return {}
        return dict(table)

    def can_create(self, services: ServiceLocator, requested_name: str) -> bool:
        """Check whether a logger named exactly ``requested_name`` is configured."""
        config = self.get_config(services)
        if not config:
            return False
        return requested_name in config

    def create(self, services: ServiceLocator, requested_name: str) -> Logger:
        """Build a new Logger for ``requested_name``.

        Raises:
            ServiceNotFoundError: If no logger is configured under that name
        """
        config = self.get_config(services)
        if requested_name not in config:
            raise ServiceNotFoundError(
                f"No logger configured under {self.config_key!r} for {requested_name!r}"
            )

        spec = config[requested_name]
        if spec is None:
            spec = {}
        elif isinstance(spec, Mapping):
            spec = resolve_references(spec, services, self.reference_options)

        logger = Logger(
            spec,
            writer_plugin_manager=self._optional_service(services, self.writer_manager_service),
            processor_plugin_manager=self._optional_service(
                services, self.processor_manager_service
            ),
        )

        self.logger.debug(
            "logger.assembled",
            name=requested_name,
            writer_count=len(logger.writers),
            processor_count=len(logger.processors),
        )
        return logger

    @staticmethod
    def _optional_service(services: ServiceLocator, name: str) -> Any:
        if not services.has(name):
            return None
        return services.get(name)
