"""Named service resolution with concrete and abstract factories."""

from .config import ServiceManagerSettings, settings
from .exceptions import (
    InvalidPluginError,
    InvalidServiceError,
    ServiceManagerException,
    ServiceNotFoundError,
)
from .interfaces import AbstractFactory, ServiceLocator
from .plugin_manager import AbstractPluginManager
from .service_manager import ServiceManager

__all__ = [
    # Core classes
    "ServiceManager",
    "AbstractPluginManager",
    "AbstractFactory",
    "ServiceLocator",
    # Configuration
    "ServiceManagerSettings",
    "settings",
    # Exceptions
    "ServiceManagerException",
    "ServiceNotFoundError",
    "InvalidServiceError",
    "InvalidPluginError",
]
