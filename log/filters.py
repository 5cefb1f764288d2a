# log/filters.py

"""Event filters attached to writers."""

import operator
from typing import Any, Protocol, runtime_checkable

from .exceptions import InvalidArgumentError

_OPERATORS = {
    "<": operator.lt,
    "<=": operator.le,
    "==": operator.eq,
    "!=": operator.ne,
    ">": operator.gt,
    ">=": operator.ge,
}


@runtime_checkable
class FilterInterface(Protocol):
    def filter(self, event: dict[str, Any]) -> bool: ...


class PriorityFilter:
    """Accept events whose priority compares true against a threshold.

    With the default ``<=`` operator, ``PriorityFilter(4)`` keeps WARN and
    everything more severe.
    """

    def __init__(self, priority: int, operator: str = "<="):
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise InvalidArgumentError(f"Priority must be an integer, got {priority!r}")
        if operator not in _OPERATORS:
            raise InvalidArgumentError(f"Unsupported priority operator {operator!r}")
        self.priority = priority
        self.operator = operator
        self._compare = _OPERATORS[operator]

    def filter(self, event: dict[str, Any]) -> bool:
        return self._compare(event["priority"], self.priority)
