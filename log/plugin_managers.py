# log/plugin_managers.py

"""Plugin managers resolving writer and processor names to instances."""

from servicemanager.plugin_manager import AbstractPluginManager

from .exceptions import InvalidProcessorError, InvalidWriterError
from .interfaces import ProcessorInterface, WriterInterface
from .processors import PsrPlaceholderProcessor, ReferenceIdProcessor, RequestIdProcessor
from .writers import DbWriter, MockWriter, NoopWriter, NullWriter, StreamWriter


class WriterPluginManager(AbstractPluginManager):
    """Build writers from names such as ``db``, ``stream`` or ``StreamWriter``."""

    invokables = {
        "db": DbWriter,
        "mock": MockWriter,
        "noop": NoopWriter,
        "null": NullWriter,
        "stream": StreamWriter,
        "DbWriter": DbWriter,
        "MockWriter": MockWriter,
        "NoopWriter": NoopWriter,
        "NullWriter": NullWriter,
        "StreamWriter": StreamWriter,
    }
    instance_of = WriterInterface
    invalid_plugin_error = InvalidWriterError


class ProcessorPluginManager(AbstractPluginManager):
    """Build processors from names such as ``referenceid`` or ``PsrPlaceholder``."""

    invokables = {
        "psrplaceholder": PsrPlaceholderProcessor,
        "referenceid": ReferenceIdProcessor,
        "requestid": RequestIdProcessor,
        "PsrPlaceholderProcessor": PsrPlaceholderProcessor,
        "ReferenceIdProcessor": ReferenceIdProcessor,
        "RequestIdProcessor": RequestIdProcessor,
    }
    instance_of = ProcessorInterface
    invalid_plugin_error = InvalidProcessorError
