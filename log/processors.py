# log/processors.py

"""Processors: transforms applied to an event before it reaches the writers."""

import re
from typing import Any, Mapping, Optional
from uuid import uuid4

_PLACEHOLDER = re.compile(r"\{([A-Za-z0-9_.]+)\}")


class AbstractProcessor:
    """Base processor; ``process`` returns the event to pass on."""

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        self.options = dict(options or {})

    def process(self, event: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError


class ReferenceIdProcessor(AbstractProcessor):
    """Tag events with a reference id, configured or generated once per processor."""

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        super().__init__(options)
        self.reference_id = self.options.get("reference_id") or uuid4().hex

    def process(self, event: dict[str, Any]) -> dict[str, Any]:
        extra = dict(event.get("extra") or {})
        extra["referenceId"] = self.reference_id
        return {**event, "extra": extra}


class RequestIdProcessor(AbstractProcessor):
    """Tag events with a request id unless one is already present."""

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        super().__init__(options)
        self.request_id = uuid4().hex

    def process(self, event: dict[str, Any]) -> dict[str, Any]:
        extra = dict(event.get("extra") or {})
        if "requestId" in extra:
            return event
        extra["requestId"] = self.request_id
        return {**event, "extra": extra}


class PsrPlaceholderProcessor(AbstractProcessor):
    """Interpolate ``{key}`` placeholders in the message from ``extra``."""

    def process(self, event: dict[str, Any]) -> dict[str, Any]:
        message = event.get("message")
        extra = event.get("extra") or {}
        if not isinstance(message, str) or "{" not in message or not extra:
            return event

        def replace(match: re.Match) -> str:
            key = match.group(1)
            if key not in extra:
                return match.group(0)
            return str(extra[key])

        return {**event, "message": _PLACEHOLDER.sub(replace, message)}
