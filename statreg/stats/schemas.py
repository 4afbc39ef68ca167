"""Pydantic schemas for statistics responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class StatEntry(BaseModel):
    """A single counter and its current value."""

    name: str = Field(..., min_length=1)
    value: int = Field(default=0, ge=0)


class DumpResult(BaseModel):
    """Outcome of a dump request."""

    entries: int = Field(..., ge=0)
