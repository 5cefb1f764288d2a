# log/logger.py

from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Sequence

from servicemanager.logging import get_logger

from .exceptions import InvalidArgumentError
from .interfaces import ProcessorInterface, WriterInterface
from .plugin_managers import ProcessorPluginManager, WriterPluginManager
from .priority import Priority

DEFAULT_PRIORITY = 1


class Logger:
    """Ordered set of writers and processors built from a logger spec.

    Args:
        options: Mapping with optional ``writers`` and ``processors`` sequences.
            Each entry is ``{"name": ..., "priority": ..., "options": ...}``;
            ``name`` may be a plugin name or an already built instance.
        writer_plugin_manager: Resolves writer names; defaults to WriterPluginManager
        processor_plugin_manager: Resolves processor names; defaults to ProcessorPluginManager
    """

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        writer_plugin_manager: Optional[WriterPluginManager] = None,
        processor_plugin_manager: Optional[ProcessorPluginManager] = None,
    ):
        self.writer_plugin_manager = writer_plugin_manager or WriterPluginManager()
        self.processor_plugin_manager = processor_plugin_manager or ProcessorPluginManager()

        # (priority, insertion index, plugin)
        self._writers: list[tuple[int, int, WriterInterface]] = []
        self._processors: list[tuple[int, int, ProcessorInterface]] = []
        self.logger = get_logger(f"{__name__}.Logger")

        if options is None:
            return
        if not isinstance(options, Mapping):
            raise InvalidArgumentError(
                f"Logger options must be a mapping, got {type(options).__name__}"
            )

        for spec in self._entries(options, "writers"):
            self.add_writer(spec["name"], spec.get("priority"), spec.get("options"))

        for spec in self._entries(options, "processors"):
            self.add_processor(spec["name"], spec.get("priority"), spec.get("options"))

    @staticmethod
    def _entries(options: Mapping[str, Any], key: str) -> Sequence[Mapping[str, Any]]:
        entries = options.get(key)
        if entries is None:
            return ()
        if not isinstance(entries, (list, tuple)):
            raise InvalidArgumentError(f"Logger {key!r} must be a list, got {type(entries).__name__}")

        for index, spec in enumerate(entries):
            if not isinstance(spec, Mapping) or "name" not in spec:
                raise InvalidArgumentError(f"{key}[{index}] must be a mapping with a 'name'")
        return entries

    @property
    def writers(self) -> tuple[WriterInterface, ...]:
        """Writers in the order they were added."""
        return tuple(writer for _, _, writer in self._writers)

    @property
    def processors(self) -> tuple[ProcessorInterface, ...]:
        """Processors in the order they were added."""
        return tuple(processor for _, _, processor in self._processors)

    def add_writer(
        self,
        writer: str | WriterInterface,
        priority: Optional[int] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> "Logger":
        """Add a writer by plugin name or instance.

        Raises:
            ServiceNotFoundError: If the writer name is unknown to the plugin manager
            InvalidArgumentError: If ``writer`` is neither a name nor a writer
        """
        if isinstance(writer, str):
            writer = self.writer_plugin_manager.build(writer, options)
        elif not isinstance(writer, WriterInterface):
            raise InvalidArgumentError(
                f"Writer must be a plugin name or implement write(), got {type(writer).__name__}"
            )

        self._writers.append((self._priority(priority), len(self._writers), writer))
        return self

    def add_processor(
        self,
        processor: str | ProcessorInterface,
        priority: Optional[int] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> "Logger":
        """Add a processor by plugin name or instance."""
        if isinstance(processor, str):
            processor = self.processor_plugin_manager.build(processor, options)
        elif not isinstance(processor, ProcessorInterface):
            raise InvalidArgumentError(
                f"Processor must be a plugin name or implement process(), got {type(processor).__name__}"
            )

        self._processors.append((self._priority(priority), len(self._processors), processor))
        return self

    @staticmethod
    def _priority(priority: Optional[int]) -> int:
        if priority is None:
            return DEFAULT_PRIORITY
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise InvalidArgumentError(f"Plugin priority must be an integer, got {priority!r}")
        return priority

    @staticmethod
    def _by_priority(entries: list[tuple[int, int, Any]]) -> list[Any]:
        # Higher priority first, insertion order among equals
        return [plugin for _, _, plugin in sorted(entries, key=lambda e: (-e[0], e[1]))]

    def log(self, priority: int, message: Any, extra: Optional[Mapping[str, Any]] = None) -> "Logger":
        """Run processors over a new event and hand it to every writer.

        Raises:
            InvalidArgumentError: If ``priority`` is not a known severity or
                ``extra`` is not a mapping
        """
        try:
            severity = Priority(priority)
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid log priority {priority!r}") from e

        if extra is not None and not isinstance(extra, Mapping):
            raise InvalidArgumentError(f"Log extra must be a mapping, got {type(extra).__name__}")

        if not self._writers:
            return self

        event: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc),
            "priority": int(severity),
            "priority_name": severity.name,
            "message": message if isinstance(message, str) else str(message),
            "extra": dict(extra or {}),
        }

        for processor in self._by_priority(self._processors):
            event = processor.process(event)

        for writer in self._by_priority(self._writers):
            writer.write(event)

        return self

    def emerg(self, message: Any, extra: Optional[Mapping[str, Any]] = None) -> "Logger":
        return self.log(Priority.EMERG, message, extra)

    def alert(self, message: Any, extra: Optional[Mapping[str, Any]] = None) -> "Logger":
        return self.log(Priority.ALERT, message, extra)

    def crit(self, message: Any, extra: Optional[Mapping[str, Any]] = None) -> "Logger":
        return self.log(Priority.CRIT, message, extra)

    def err(self, message: Any, extra: Optional[Mapping[str, Any]] = None) -> "Logger":
        return self.log(Priority.ERR, message, extra)

    def warn(self, message: Any, extra: Optional[Mapping[str, Any]] = None) -> "Logger":
        return self.log(Priority.WARN, message, extra)

    def notice(self, message: Any, extra: Optional[Mapping[str, Any]] = None) -> "Logger":
        return self.log(Priority.NOTICE, message, extra)

    def info(self, message: Any, extra: Optional[Mapping[str, Any]] = None) -> "Logger":
        return self.log(Priority.INFO, message, extra)

    def debug(self, message: Any, extra: Optional[Mapping[str, Any]] = None) -> "Logger":
        return self.log(Priority.DEBUG, message, extra)

    def shutdown(self) -> None:
        """Shut down every writer."""
        for writer in self.writers:
            writer.shutdown()
        self.logger.debug("logger.shutdown", writer_count=len(self._writers))
