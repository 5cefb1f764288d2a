# log/__init__.py

"""Configurable loggers: writers, processors and the logger abstract factory."""

from .abstract_factory import LoggerAbstractServiceFactory, resolve_references
from .exceptions import (
    InvalidArgumentError,
    InvalidProcessorError,
    InvalidWriterError,
    LogException,
    RuntimeWriterError,
)
from .filters import PriorityFilter
from .formatters import SimpleFormatter
from .interfaces import ProcessorInterface, WriterInterface
from .logger import Logger
from .plugin_managers import ProcessorPluginManager, WriterPluginManager
from .priority import Priority
from .processors import PsrPlaceholderProcessor, ReferenceIdProcessor, RequestIdProcessor
from .writers import DbWriter, MockWriter, NoopWriter, NullWriter, StreamWriter

__all__ = [
    "Logger",
    "LoggerAbstractServiceFactory",
    "resolve_references",
    "Priority",
    "WriterPluginManager",
    "ProcessorPluginManager",
    "WriterInterface",
    "ProcessorInterface",
    "DbWriter",
    "MockWriter",
    "NoopWriter",
    "NullWriter",
    "StreamWriter",
    "PsrPlaceholderProcessor",
    "ReferenceIdProcessor",
    "RequestIdProcessor",
    "PriorityFilter",
    "SimpleFormatter",
    # Exceptions
    "LogException",
    "InvalidArgumentError",
    "InvalidWriterError",
    "InvalidProcessorError",
    "RuntimeWriterError",
]
