# log/exceptions.py

"""Exception hierarchy for loggers, writers and processors."""

from servicemanager.exceptions import InvalidPluginError


class LogException(Exception):
    """Base exception for all logging component errors."""

    pass


class InvalidArgumentError(LogException, ValueError):
    """Raised when a logger, writer or processor receives unusable input."""

    pass


class InvalidWriterError(LogException, InvalidPluginError):
    """Raised when a writer plugin does not implement the writer interface."""

    pass


class InvalidProcessorError(LogException, InvalidPluginError):
    """Raised when a processor plugin does not implement the processor interface."""

    pass


class RuntimeWriterError(LogException, RuntimeError):
    """Raised when a writer cannot emit an event."""

    pass
