# servicemanager/exceptions.py

"""Exception hierarchy for service resolution."""


class ServiceManagerException(Exception):
    """Base exception for all service manager errors."""

    pass


class ServiceNotFoundError(ServiceManagerException, LookupError):
    """Raised when no registration or abstract factory can provide a service."""

    pass


class InvalidServiceError(ServiceManagerException):
    """Raised when a registration is not usable (bad factory, bad name)."""

    pass


class InvalidPluginError(ServiceManagerException):
    """Raised when a plugin manager builds an instance of the wrong type."""

    pass
