"""
WinFocus Agent (FastAPI + Uvicorn)

Goals
- Expose the window focus engine to local tools that cannot import Python (AHK, PowerShell, editors).
- Auth: /health is open; /v1/* requires X-WinFocus-Token (token lives in %LOCALAPPDATA%/WinFocus/token.txt).
- The engine is synchronous; endpoints run it in a worker thread so the loop stays responsive.
- Never crash on OS trouble: enumeration problems show up as empty lists / found=false.
"""

from __future__ import annotations

import secrets
from contextlib import asynccontextmanager
from typing import Any, Callable

from anyio import to_thread
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from winfocus.errors import MalformedQueryError
from winfocus.models.schemas import (CompleteRequest, CompleteResponse,
                                     CompletionItem, FocusRequest,
                                     FocusResponse, HealthResponse,
                                     PingResponse, ResolveRequest,
                                     ResolveResponse, WindowListResponse)
from winfocus.services.focus_service import FocusService
from winfocus.services.logs import configure_logging
from winfocus.settings import (APP_DIR, LOG_DIR, MAX_SUGGESTIONS, TOKEN_FILE,
                               WINFOCUS_HOST, WINFOCUS_PORT)

VERSION = "0.3.0"


def _get_or_create_token() -> str:
    """Read token from file; if absent, create and persist."""
    if TOKEN_FILE.exists():
        t = TOKEN_FILE.read_text(encoding="utf-8").strip()
        if t:
            return t
    APP_DIR.mkdir(parents=True, exist_ok=True)
    t = secrets.token_urlsafe(24)
    TOKEN_FILE.write_text(t, encoding="utf-8")
    return t


_SERVICE = FocusService()


def get_service() -> FocusService:
    """Dependency hook; tests override it with a fake desktop."""
    return _SERVICE


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    logger.info("Agent startup; logs at {}", LOG_DIR)
    _get_or_create_token()
    yield
    logger.info("Agent shutdown")


app = FastAPI(title="WinFocus Agent", version=VERSION, lifespan=lifespan)


@app.middleware("http")
async def dispatch(request: Request, call_next: Callable[..., Any]):
    """Allow / and /health without token; require X-WinFocus-Token for /v1/*."""
    path = request.url.path or "/"
    if path.startswith("/v1"):
        hdr = request.headers.get("x-winfocus-token")
        if not hdr or not secrets.compare_digest(hdr, _get_or_create_token()):
            logger.warning("Rejected request: missing/invalid X-WinFocus-Token")
            return JSONResponse({"error": "unauthorized"}, status_code=401)
    return await call_next(request)


# ---- Health & Ping -----------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", name="WinFocus Agent", version=VERSION, port=WINFOCUS_PORT)


@app.get("/v1/ping", response_model=PingResponse)
async def ping() -> PingResponse:
    t = _get_or_create_token()
    return PingResponse(pong="pong", token_last4=t[-4:])


# ---- Windows -----------------------------------------------------------------


@app.get("/v1/windows", response_model=WindowListResponse)
async def windows(svc: FocusService = Depends(get_service)) -> WindowListResponse:
    found = await to_thread.run_sync(svc.windows)
    return WindowListResponse(windows=found)


@app.post("/v1/resolve", response_model=ResolveResponse)
async def resolve(body: ResolveRequest, svc: FocusService = Depends(get_service)) -> ResolveResponse:
    try:
        result = await to_thread.run_sync(svc.resolve, body.query, body.strict)
    except MalformedQueryError as e:
        return ResolveResponse(found=False, error=str(e))
    return ResolveResponse(found=result.found, handle=result.handle, strategy=result.strategy)


@app.post("/v1/complete", response_model=CompleteResponse)
async def complete(body: CompleteRequest, svc: FocusService = Depends(get_service)) -> CompleteResponse:
    limit = body.limit if body.limit is not None else MAX_SUGGESTIONS
    ranked = await to_thread.run_sync(svc.rank, body.partial, limit or None)
    items = [CompletionItem(display=c.display, handle=c.handle, score=c.score) for c in ranked]
    return CompleteResponse(partial=body.partial, items=items)


@app.post("/v1/focus", response_model=FocusResponse)
async def focus(body: FocusRequest, svc: FocusService = Depends(get_service)) -> FocusResponse:
    result = await to_thread.run_sync(svc.focus, body.query)
    return FocusResponse(ok=result.found, handle=result.handle, strategy=result.strategy)


# --------------- Runner -------------------


def main() -> None:
    """Run uvicorn with external logging disabled (Loguru handles logs)."""
    import uvicorn

    config = uvicorn.Config(
        app,
        host=WINFOCUS_HOST,
        port=WINFOCUS_PORT,
        log_config=None,
        access_log=False,
        loop="asyncio",
        lifespan="on",
    )

    server = uvicorn.Server(config)
    logger.info("Starting Uvicorn on {}:{}", WINFOCUS_HOST, WINFOCUS_PORT)
    try:
        server.run()  # blocking
    except Exception:  # noqa: BLE001
        logger.exception("Fatal error starting WinFocus Agent")
        raise
    finally:
        logger.info("Uvicorn exited (graceful={})", getattr(server, "should_exit", None))


if __name__ == "__main__":
    main()
