"""Statistics package providing the named-counter registry."""

from statreg.stats.default import (
    STATS,
    add_stat_entry,
    dump_stats,
    finalize_stat,
    increment_stat,
    init_stat,
)
from statreg.stats.errors import PreconditionViolation
from statreg.stats.registry import UINT64_MAX, StatRegistry
from statreg.stats.sink import LoggerSink, RecordingSink, StatSink

__all__ = [
    "STATS",
    "LoggerSink",
    "PreconditionViolation",
    "RecordingSink",
    "StatRegistry",
    "StatSink",
    "UINT64_MAX",
    "add_stat_entry",
    "dump_stats",
    "finalize_stat",
    "increment_stat",
    "init_stat",
]
