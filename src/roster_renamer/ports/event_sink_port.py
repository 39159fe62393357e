from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EventSinkPort(Protocol):
    def emit(self, level: str, message: str) -> None:
        """Report a message to the operator; level is debug, info, warning or error."""
