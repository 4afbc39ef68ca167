"""In-memory registry of named 64-bit counters."""

from __future__ import annotations

import logging
import threading
from types import TracebackType
from typing import Dict

from statreg.config import get_settings
from statreg.lib.logger import get_logger
from statreg.stats.errors import require
from statreg.stats.sink import LoggerSink, StatSink

UINT64_MAX = (1 << 64) - 1

DUMP_HEADER = "Statistics:"
DUMP_EMPTY = "No statistics found."

logger = get_logger(__name__)


def name_size(name: str) -> int:
    """Size of a counter name in UTF-8 bytes, the unit of the key length limit."""

    return len(name.encode("utf-8"))


class StatRegistry:
    """Table of named counters with an explicit initialize/finalize lifecycle.

    A registry is ready for use once constructed unless ``initialized=False``
    is passed. Every operation other than :meth:`initialize` requires the
    registry to be initialized and raises
    :class:`~statreg.stats.errors.PreconditionViolation` otherwise.

    Entries are kept in insertion order, which is also the order used by
    :meth:`dump` and :meth:`snapshot`. All operations run under one lock.
    """

    def __init__(
        self,
        name: str = "default",
        *,
        sink: StatSink | None = None,
        key_length: int | None = None,
        initialized: bool = True,
    ) -> None:
        self.name = name
        self._sink: StatSink = sink if sink is not None else LoggerSink(registry=name)
        self._key_length = key_length if key_length is not None else get_settings().stat_key_length
        self._lock = threading.Lock()
        self._entries: Dict[str, int] | None = None
        if initialized:
            self.initialize()

    @property
    def key_length(self) -> int:
        return self._key_length

    @property
    def is_initialized(self) -> bool:
        with self._lock:
            return self._entries is not None

    def initialize(self) -> bool:
        """Allocate a fresh, empty table, dropping any previous entries."""

        with self._lock:
            previous = self._entries
            self._entries = {}
        if previous is not None:
            logger.debug("Statistics registry reinitialized", extra={"registry": self.name, "dropped": len(previous)})
        else:
            logger.debug("Statistics registry initialized", extra={"registry": self.name})
        return True

    def finalize(self) -> bool:
        """Release the table; the registry returns to the uninitialized state."""

        with self._lock:
            self._require_initialized("finalize")
            self._entries = None
        logger.debug("Statistics registry finalized", extra={"registry": self.name})
        return True

    def add_entry(self, name: str) -> bool:
        """Register ``name`` with value 0; return False if it already exists."""

        with self._lock:
            entries = self._require_initialized("add_entry")
            self._require_valid_name(name)
            if name in entries:
                return False
            entries[name] = 0
            return True

    def increment(self, name: str) -> int:
        """Add one to ``name``, creating it at 0 first when absent; return the new value."""

        with self._lock:
            entries = self._require_initialized("increment")
            self._require_valid_name(name)
            value = (entries.get(name, 0) + 1) & UINT64_MAX
            entries[name] = value
            return value

    def lookup(self, name: str) -> int | None:
        with self._lock:
            entries = self._require_initialized("lookup")
            return entries.get(name)

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._require_initialized("snapshot"))

    def dump(self) -> None:
        """Emit a header line and one ``"<name>: <value>"`` line per entry."""

        with self._lock:
            entries = self._require_initialized("dump")
            lines = [f"{name}: {value}" for name, value in entries.items()]
            # Lines are written while holding the lock so concurrent dumps do not interleave.
            self._sink.log(logging.INFO, DUMP_HEADER)
            if not lines:
                self._sink.log(logging.INFO, DUMP_EMPTY)
                return
            for line in lines:
                self._sink.log(logging.INFO, line)

    def __len__(self) -> int:
        with self._lock:
            return len(self._require_initialized("len"))

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._require_initialized("contains")

    def __enter__(self) -> "StatRegistry":
        if not self.is_initialized:
            self.initialize()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.finalize()

    def _require_initialized(self, operation: str) -> Dict[str, int]:
        entries = self._entries
        require(entries is not None, f"{operation}() called on uninitialized statistics registry '{self.name}'")
        return entries  # type: ignore[return-value]

    def _require_valid_name(self, name: object) -> None:
        require(isinstance(name, str), f"counter name must be a string, got {type(name).__name__}")
        require(bool(name), "counter name must be non-empty")
        limit = self._key_length - 1
        require(name_size(name) <= limit, f"counter name exceeds {limit} bytes")  # type: ignore[arg-type]
