from __future__ import annotations

import logging

from roster_renamer.ports.event_sink_port import EventSinkPort

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class LoggingEventSink(EventSinkPort):
    def __init__(self, logger_name: str = "roster_renamer") -> None:
        self._logger = logging.getLogger(logger_name)

    def emit(self, level: str, message: str) -> None:
        self._logger.log(_LEVELS.get(level.lower(), logging.INFO), message)


class MemoryEventSink(EventSinkPort):
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def emit(self, level: str, message: str) -> None:
        self.events.append((level, message))

    def messages(self, level: str | None = None) -> list[str]:
        return [message for lvl, message in self.events if level is None or lvl == level]
