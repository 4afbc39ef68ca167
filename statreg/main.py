"""FastAPI application entrypoint exposing the process-wide statistics registry."""

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.requests import Request
from fastapi.responses import JSONResponse, Response

from statreg.lib.logger import configure_logging, get_logger
from statreg.stats import STATS, init_stat
from statreg.stats.routes import router as stats_router

configure_logging()
logger = get_logger(__name__)

init_stat()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    registry = app.state.stats
    if not registry.is_initialized:
        registry.initialize()
    yield
    if registry.is_initialized:
        registry.dump()
        registry.finalize()
    logger.info("Statistics registry released on shutdown")


app = FastAPI(title="Statistics Registry", version="0.1.0", lifespan=lifespan)
app.state.stats = STATS

app.include_router(stats_router, prefix="/stats", tags=["stats"])


@app.middleware("http")
async def count_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Count every handled request on the application registry."""

    registry = request.app.state.stats
    if registry.is_initialized:
        registry.increment("http.requests")
    return await call_next(request)


@app.get("/health", tags=["system"], summary="Health check")
async def health_check() -> JSONResponse:
    """Return liveness response for uptime monitoring."""
    payload = {"ok": True, "data": {"status": "healthy"}}
    return JSONResponse(content=payload)
