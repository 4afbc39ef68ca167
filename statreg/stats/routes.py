"""Statistics routes exposing the registry over HTTP."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Request
from fastapi.responses import JSONResponse

from statreg.stats.registry import StatRegistry, name_size
from statreg.stats.schemas import DumpResult, StatEntry

router = APIRouter()


def get_stat_registry(request: Request) -> StatRegistry:
    registry: StatRegistry | None = getattr(request.app.state, "stats", None)
    if registry is None:
        raise RuntimeError("Statistics registry not configured on application state")
    return registry


def _checked_name(name: str, registry: StatRegistry) -> str:
    limit = registry.key_length - 1
    if name_size(name) > limit:
        raise HTTPException(status_code=422, detail=f"Statistic name exceeds {limit} bytes")
    return name


@router.get("")
async def list_stats(registry: StatRegistry = Depends(get_stat_registry)) -> JSONResponse:
    return JSONResponse({"ok": True, "data": registry.snapshot()})


@router.post("/dump")
async def dump_stats(registry: StatRegistry = Depends(get_stat_registry)) -> JSONResponse:
    """Write all counters to the log and report how many were written."""

    count = len(registry)
    registry.dump()
    return JSONResponse({"ok": True, "data": DumpResult(entries=count).model_dump()})


@router.get("/entries/{name}")
async def get_entry(
    name: str = Path(..., min_length=1),
    registry: StatRegistry = Depends(get_stat_registry),
) -> JSONResponse:
    value = registry.lookup(name)
    if value is None:
        raise HTTPException(status_code=404, detail="Statistic not found")
    return JSONResponse({"ok": True, "data": StatEntry(name=name, value=value).model_dump()})


@router.post("/entries/{name}")
async def register_entry(
    name: str = Path(..., min_length=1),
    registry: StatRegistry = Depends(get_stat_registry),
) -> JSONResponse:
    """Register a counter at zero; duplicates are rejected with 409."""

    if not registry.add_entry(_checked_name(name, registry)):
        raise HTTPException(status_code=409, detail="Statistic already registered")
    return JSONResponse({"ok": True, "data": StatEntry(name=name, value=0).model_dump()})


@router.post("/entries/{name}/increment")
async def increment_entry(
    name: str = Path(..., min_length=1),
    registry: StatRegistry = Depends(get_stat_registry),
) -> JSONResponse:
    value = registry.increment(_checked_name(name, registry))
    return JSONResponse({"ok": True, "data": StatEntry(name=name, value=value).model_dump()})
