"""Log sinks receiving rendered statistics lines."""

from __future__ import annotations

import logging
from typing import Protocol

from statreg.lib.logger import get_logger


class StatSink(Protocol):
    """Accepts one pre-rendered line per call at the given severity."""

    def log(self, level: int, message: str) -> None: ...


class LoggerSink:
    """Forward statistics lines to a standard-library logger."""

    def __init__(self, logger: logging.Logger | None = None, *, registry: str = "default") -> None:
        self._logger = logger if logger is not None else get_logger("statreg.stats")
        self._registry = registry

    def log(self, level: int, message: str) -> None:
        self._logger.log(level, message, extra={"registry": self._registry})


class RecordingSink:
    """Keep emitted lines in memory; handy for assertions and ad-hoc reports."""

    def __init__(self) -> None:
        self.records: list[tuple[int, str]] = []

    def log(self, level: int, message: str) -> None:
        self.records.append((level, message))

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.records]

    def clear(self) -> None:
        self.records.clear()
