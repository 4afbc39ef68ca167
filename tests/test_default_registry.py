"""Tests for the process-wide registry helpers."""

from __future__ import annotations

import pytest

from statreg.stats import (
    STATS,
    PreconditionViolation,
    add_stat_entry,
    dump_stats,
    finalize_stat,
    increment_stat,
    init_stat,
)
from statreg.stats import default as default_module
from statreg.stats.registry import StatRegistry
from statreg.stats.sink import RecordingSink


@pytest.fixture()
def recorded_stats(monkeypatch) -> RecordingSink:
    """Swap the process-wide registry for one writing to memory."""

    sink = RecordingSink()
    monkeypatch.setattr(default_module, "STATS", StatRegistry("default", sink=sink))
    return sink


def test_helpers_share_the_process_registry() -> None:
    assert add_stat_entry("frames") is True
    increment_stat("frames")
    increment_stat("errors")

    assert STATS.snapshot() == {"frames": 1, "errors": 1}
    assert add_stat_entry("frames") is False


def test_init_stat_resets_entries() -> None:
    increment_stat("key")

    assert init_stat() is True
    assert STATS.snapshot() == {}


def test_helpers_fail_after_finalize() -> None:
    assert finalize_stat() is True

    with pytest.raises(PreconditionViolation):
        increment_stat("key")
    with pytest.raises(PreconditionViolation):
        add_stat_entry("key")
    with pytest.raises(PreconditionViolation):
        dump_stats()
    with pytest.raises(PreconditionViolation):
        finalize_stat()


def test_dump_stats_writes_entries(recorded_stats: RecordingSink) -> None:
    increment_stat("key")

    dump_stats()

    assert recorded_stats.messages == ["Statistics:", "key: 1"]


def test_dump_stats_without_entries(recorded_stats: RecordingSink) -> None:
    dump_stats()

    assert recorded_stats.messages == ["Statistics:", "No statistics found."]
