"""Errors raised by the statistics registry."""

from __future__ import annotations


class PreconditionViolation(AssertionError):
    """A caller broke the registry contract (uninitialized use, bad counter name).

    This signals a programming error, not an environmental failure. It derives
    from ``AssertionError`` so it is treated like a failed assertion and should
    not be caught by ordinary error handling.
    """


def require(condition: bool, message: str) -> None:
    if not condition:
        raise PreconditionViolation(message)
