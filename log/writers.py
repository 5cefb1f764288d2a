# log/writers.py

"""Writers: sinks that emit log events."""

from datetime import datetime
from typing import IO, Any, Mapping, Optional

from servicemanager.logging import get_logger

from .exceptions import InvalidArgumentError, RuntimeWriterError
from .filters import FilterInterface, PriorityFilter
from .formatters import SimpleFormatter

_SCALARS = (str, int, float, bool, type(None))


class AbstractWriter:
    """Base writer applying filters before delegating to ``_do_write``.

    Recognised options:
        filters: int priority threshold, a filter object, or a list of either
        formatter: object with ``format(event) -> str``
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        options = dict(options or {})
        self.options = options
        self.filters: list[FilterInterface] = []
        self.formatter = options.get("formatter") or SimpleFormatter()

        filters = options.get("filters")
        if filters is not None:
            if not isinstance(filters, (list, tuple)):
                filters = [filters]
            for item in filters:
                self.add_filter(item)

    def add_filter(self, item: int | FilterInterface) -> None:
        if isinstance(item, int) and not isinstance(item, bool):
            item = PriorityFilter(item)
        if not isinstance(item, FilterInterface):
            raise InvalidArgumentError(
                f"Writer filter must be a priority or expose filter(), got {type(item).__name__}"
            )
        self.filters.append(item)

    def write(self, event: dict[str, Any]) -> None:
        for item in self.filters:
            if not item.filter(event):
                return
        self._do_write(event)

    def _do_write(self, event: dict[str, Any]) -> None:
        raise NotImplementedError

    def shutdown(self) -> None:
        pass


class NoopWriter(AbstractWriter):
    """Discard every event."""

    def _do_write(self, event: dict[str, Any]) -> None:
        pass


class NullWriter(NoopWriter):
    pass


class MockWriter(AbstractWriter):
    """Collect events in memory."""

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        super().__init__(options)
        self.events: list[dict[str, Any]] = []
        self.shut_down = False

    def _do_write(self, event: dict[str, Any]) -> None:
        self.events.append(event)

    def shutdown(self) -> None:
        self.shut_down = True


class StreamWriter(AbstractWriter):
    """Write formatted lines to a file-like object or a file path.

    Options:
        stream: file-like object or path string (required)
        mode: open mode used for paths, default "a"
        log_separator: appended to each line, default newline
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        super().__init__(options)
        stream = self.options.get("stream")
        if stream is None:
            raise InvalidArgumentError("StreamWriter requires a 'stream' option")

        self._owns_stream = isinstance(stream, str)
        if self._owns_stream:
            try:
                stream = open(stream, self.options.get("mode", "a"), encoding="utf-8")
            except OSError as e:
                raise InvalidArgumentError(f"Cannot open log stream {stream!r}: {e}") from e
        elif not hasattr(stream, "write"):
            raise InvalidArgumentError(
                f"StreamWriter stream must be writable, got {type(stream).__name__}"
            )

        self.stream: IO[str] = stream
        self.log_separator = self.options.get("log_separator", "\n")

    def _do_write(self, event: dict[str, Any]) -> None:
        self.stream.write(self.formatter.format(event) + self.log_separator)
        if hasattr(self.stream, "flush"):
            self.stream.flush()

    def shutdown(self) -> None:
        if self._owns_stream and not self.stream.closed:
            self.stream.close()


class DbWriter(AbstractWriter):
    """Insert events into a database table through a DB-API connection.

    Options:
        db: DB-API connection (anything exposing ``cursor()``)
        table: destination table (required), optionally "schema.table";
            identifiers are quoted
        column: event key -> column name; nested mappings address one level
            down, e.g. ``{"extra": {"user": "user_id"}}``
        separator: joins nested keys when no column map is given, default "_"
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        super().__init__(options)
        self.table = self.options.get("table")
        if not self.table:
            raise InvalidArgumentError("DbWriter requires a 'table' option")

        # An unresolved service name is accepted here and rejected on write.
        self.db = self.options.get("db")
        self.column_map: Optional[Mapping[str, Any]] = self.options.get("column") or None
        self.separator = self.options.get("separator", "_")
        self.logger = get_logger(f"{__name__}.DbWriter")

    def _do_write(self, event: dict[str, Any]) -> None:
        if not hasattr(self.db, "cursor"):
            raise RuntimeWriterError(
                f"DbWriter for table {self.table!r} has no database connection "
                f"(got {type(self.db).__name__})"
            )

        if self.column_map:
            row = self._map_columns(event)
        else:
            row = self._flatten(event)

        table = ".".join(self._quote_identifier(part) for part in str(self.table).split("."))
        columns = ", ".join(self._quote_identifier(column) for column in row)
        placeholders = ", ".join("?" * len(row))
        sql = f"INSERT INTO {table} ({columns}) VALUES ({placeholders})"

        try:
            cursor = self.db.cursor()
            cursor.execute(sql, tuple(row.values()))
            if hasattr(self.db, "commit"):
                self.db.commit()
        except Exception as e:
            self.logger.error("event.insert_failed", table=self.table, error=str(e))
            raise RuntimeWriterError(f"Failed to write event to {self.table!r}: {e}") from e

    def _map_columns(self, event: dict[str, Any]) -> dict[str, Any]:
        row: dict[str, Any] = {}
        for key, target in self.column_map.items():
            value = event.get(key)
            if isinstance(target, Mapping):
                nested = value if isinstance(value, Mapping) else {}
                for sub_key, column in target.items():
                    row[column] = self._scalar(nested.get(sub_key))
            else:
                row[target] = self._scalar(value)
        return row

    def _flatten(self, event: dict[str, Any]) -> dict[str, Any]:
        row: dict[str, Any] = {}
        for key, value in event.items():
            if isinstance(value, Mapping):
                for sub_key, sub_value in value.items():
                    row[f"{key}{self.separator}{sub_key}"] = self._scalar(sub_value)
            else:
                row[key] = self._scalar(value)
        return row

    @staticmethod
    def _quote_identifier(name: Any) -> str:
        return '"' + str(name).replace('"', '""') + '"'

    @staticmethod
    def _scalar(value: Any) -> Any:
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, _SCALARS):
            return value
        return str(value)
