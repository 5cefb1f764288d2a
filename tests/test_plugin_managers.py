"""Tests for writer and processor plugin managers."""

from unittest.mock import MagicMock

import pytest

from log.exceptions import InvalidProcessorError, InvalidWriterError
from log.plugin_managers import ProcessorPluginManager, WriterPluginManager
from log.processors import PsrPlaceholderProcessor, ReferenceIdProcessor, RequestIdProcessor
from log.writers import DbWriter, MockWriter, NoopWriter, NullWriter, StreamWriter
from servicemanager.exceptions import InvalidPluginError, ServiceNotFoundError


class TestWriterPluginManager:
    """Writer names map to writer classes."""

    @pytest.mark.parametrize(
        "name,cls",
        [
            ("noop", NoopWriter),
            ("Noop", NoopWriter),
            ("NoopWriter", NoopWriter),
            ("null", NullWriter),
            ("mock", MockWriter),
            ("MOCK", MockWriter),
        ],
    )
    def test_builds_by_name(self, name, cls):
        """Names are matched case-insensitively."""
        assert type(WriterPluginManager().build(name)) is cls

    def test_options_reach_constructor(self, tmp_path):
        """The options mapping is passed to the writer."""
        writer = WriterPluginManager().build("stream", {"stream": str(tmp_path / "app.log")})

        assert isinstance(writer, StreamWriter)
        writer.shutdown()

    def test_db_writer(self):
        """db builds a DbWriter holding whatever db value it was given."""
        connection = MagicMock()
        writer = WriterPluginManager().build("db", {"db": connection, "table": "log"})

        assert isinstance(writer, DbWriter)
        assert writer.db is connection

    def test_unknown_writer(self):
        """Unknown names raise ServiceNotFoundError."""
        with pytest.raises(ServiceNotFoundError):
            WriterPluginManager().build("syslog-ng")

    def test_builds_new_instance_each_time(self):
        """Built writers are not shared."""
        manager = WriterPluginManager()

        assert manager.build("mock") is not manager.build("mock")

    def test_registered_service_returned(self):
        """Prebuilt writers are returned as registered."""
        manager = WriterPluginManager()
        writer = MockWriter()
        manager.set_service("CustomWriter", writer)

        assert manager.has("customwriter")
        assert manager.build("CustomWriter", {"ignored": True}) is writer

    def test_invalid_writer_rejected(self):
        """Objects that cannot write are rejected."""
        manager = WriterPluginManager()

        with pytest.raises(InvalidWriterError):
            manager.set_service("Broken", object())

    def test_invalid_writer_class(self):
        """A registered class that does not build a writer is rejected."""
        manager = WriterPluginManager()
        manager.set_invokable("dict", dict)

        with pytest.raises(InvalidPluginError):
            manager.build("dict")

    def test_has(self):
        """has() checks names without building."""
        manager = WriterPluginManager()

        assert manager.has("stream")
        assert not manager.has("carrier-pigeon")
        assert not manager.has(None)


class TestProcessorPluginManager:
    """Processor names map to processor classes."""

    @pytest.mark.parametrize(
        "name,cls",
        [
            ("psrplaceholder", PsrPlaceholderProcessor),
            ("PsrPlaceholder", PsrPlaceholderProcessor),
            ("referenceid", ReferenceIdProcessor),
            ("RequestIdProcessor", RequestIdProcessor),
        ],
    )
    def test_builds_by_name(self, name, cls):
        """Names are matched case-insensitively."""
        assert type(ProcessorPluginManager().build(name)) is cls

    def test_invalid_processor_rejected(self):
        """Objects without process() are rejected."""
        with pytest.raises(InvalidProcessorError):
            ProcessorPluginManager().set_service("Broken", object())

    def test_get_is_build(self):
        """get() is an alias for build()."""
        processor = ProcessorPluginManager().get("referenceid", {"reference_id": "abc"})

        assert processor.reference_id == "abc"
