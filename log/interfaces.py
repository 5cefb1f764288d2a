# log/interfaces.py

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class WriterInterface(Protocol):
    def write(self, event: dict[str, Any]) -> None: ...

    def shutdown(self) -> None: ...


@runtime_checkable
class ProcessorInterface(Protocol):
    def process(self, event: dict[str, Any]) -> dict[str, Any]: ...
