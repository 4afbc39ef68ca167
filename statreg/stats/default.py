"""Process-wide statistics registry and module-level helpers.

Code that does not want to pass a :class:`StatRegistry` around can use these
helpers, which all act on :data:`STATS`. The registry starts uninitialized;
startup code calls :func:`init_stat` and shutdown code :func:`finalize_stat`.
"""

from __future__ import annotations

from statreg.stats.registry import StatRegistry

STATS = StatRegistry("default", initialized=False)


def init_stat() -> bool:
    return STATS.initialize()


def finalize_stat() -> bool:
    return STATS.finalize()


def add_stat_entry(name: str) -> bool:
    return STATS.add_entry(name)


def increment_stat(name: str) -> None:
    STATS.increment(name)


def dump_stats() -> None:
    STATS.dump()
