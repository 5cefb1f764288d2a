# log/formatters.py

import string
from datetime import datetime
from typing import Any, Optional

from .exceptions import InvalidArgumentError

DEFAULT_FORMAT = "{timestamp} {priority_name} ({priority}): {message} {extra}"

EVENT_FIELDS = frozenset({"timestamp", "priority", "priority_name", "message", "extra"})


class _EventValues(dict):
    """Render fields a processor removed as empty text."""

    def __missing__(self, key: str) -> str:
        return ""


def _placeholder_fields(format_string: str) -> set[str]:
    fields = set()
    try:
        parsed = list(string.Formatter().parse(format_string))
    except ValueError as e:
        raise InvalidArgumentError(f"Malformed log format {format_string!r}: {e}") from e

    for _, field_name, _, _ in parsed:
        if field_name is None:
            continue
        root = field_name.split(".", 1)[0].split("[", 1)[0]
        if not root or root.isdigit():
            raise InvalidArgumentError(
                f"Log format {format_string!r} must use named event fields"
            )
        fields.add(root)
    return fields


class SimpleFormatter:
    """Render an event as a single line of text.

    Placeholders must name event fields: timestamp, priority, priority_name,
    message or extra.
    """

    def __init__(self, format: Optional[str] = None, date_time_format: Optional[str] = None):
        self.format_string = format or DEFAULT_FORMAT
        self.date_time_format = date_time_format

        unknown = _placeholder_fields(self.format_string) - EVENT_FIELDS
        if unknown:
            raise InvalidArgumentError(
                f"Log format {self.format_string!r} uses unknown fields: {', '.join(sorted(unknown))}"
            )

    def format(self, event: dict[str, Any]) -> str:
        timestamp = event.get("timestamp")
        if isinstance(timestamp, datetime):
            timestamp = (
                timestamp.strftime(self.date_time_format)
                if self.date_time_format
                else timestamp.isoformat()
            )

        values = _EventValues(event)
        values["timestamp"] = timestamp
        values["extra"] = event.get("extra") or ""

        return self.format_string.format_map(values).rstrip()
