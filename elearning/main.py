# elearning/main.py
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import anyio.to_thread
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, Response
from fastapi.staticfiles import StaticFiles

from elearning.core.config import Settings, settings as default_settings
from elearning.core.errors import (
    PortalError,
    RequestTimedOut,
    portal_error_handler,
    render_error,
    request_validation_handler,
)
from elearning.models.db import make_engine, make_session_factory
from elearning.utils.seed import init_db
from elearning.routers import auth, courses, enrollment, attendance, timetable

log = logging.getLogger(__name__)

INDEX_REDIRECT_HTML = (
    "<!DOCTYPE html><html><head><title>Redirect</title></head>"
    "<body><script>window.location.href='index.html';</script></body></html>"
)


class PreflightCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that answers every preflight with 204 No Content."""

    def preflight_response(self, request_headers) -> Response:
        # the parent answers 400 for unlisted headers or methods
        response = super().preflight_response(request_headers)
        headers = {
            k: v for k, v in response.headers.items()
            if k.lower() not in {"content-length", "content-type"}
        }
        return Response(status_code=204, headers=headers)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    engine = make_engine(settings)
    session_factory = make_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # sync endpoints share anyio's worker threads
        anyio.to_thread.current_default_thread_limiter().total_tokens = settings.WORKER_THREADS
        init_db(engine, session_factory)
        log.info("[APP] %s ready (db=%s, workers=%d)", settings.APP_NAME, engine.url, settings.WORKER_THREADS)
        yield
        engine.dispose()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_exception_handler(PortalError, portal_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # ---------- Request timeout ----------
    @app.middleware("http")
    async def request_timeout(request: Request, call_next):
        timeout = settings.REQUEST_TIMEOUT_SECONDS
        if not timeout or timeout <= 0:
            return await call_next(request)
        try:
            return await asyncio.wait_for(call_next(request), timeout=timeout)
        except asyncio.TimeoutError:
            log.warning("[HTTP] %s %s timed out after %ss", request.method, request.url.path, timeout)
            exc = RequestTimedOut()
            return render_error(request, exc.message, exc.status_code)

    # ---------- CORS (outermost, so error responses carry the headers too) ----------
    app.add_middleware(
        PreflightCORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS or ["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # ---------- API routers ----------
    app.include_router(auth.router)
    app.include_router(courses.router)
    app.include_router(enrollment.router)
    app.include_router(attendance.router)
    app.include_router(timetable.router)

    @app.options("/api/{path:path}", include_in_schema=False)
    def api_options(path: str):
        return Response(status_code=204)

    # ---------- Root, health ----------
    @app.get("/", response_class=HTMLResponse)
    def root():
        return HTMLResponse(INDEX_REDIRECT_HTML)

    @app.get("/healthz")
    def health():
        return {"ok": True, "app": settings.APP_NAME}

    # ---------- Frontend (Static) ----------
    # mounted last so it never shadows the API
    if settings.STATIC_DIR:
        static_dir = Path(settings.STATIC_DIR)
        if static_dir.is_dir():
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="frontend")
        else:
            log.warning("[APP] STATIC_DIR %s does not exist; not serving static files", static_dir)

    return app


app = create_app()
