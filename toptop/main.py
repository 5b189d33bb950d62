"""Application entry point for the FastAPI backend."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .database import init_db
from .routers import rpc_router, videos_router
from .ui.router import router as ui_router
from .ui.template_helpers import render_template

logger = logging.getLogger(__name__)

settings = get_settings()
APP_NAME = settings.app_name
API_VERSION = settings.api_version

app = FastAPI(title=APP_NAME, version=API_VERSION)

cors_origins = os.getenv("CORS_ORIGINS")
if cors_origins:
    origins: Iterable[str] = [origin.strip() for origin in cors_origins.split(",") if origin.strip()]
else:
    origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ui_router)
app.include_router(rpc_router)
app.include_router(videos_router)


@app.exception_handler(StarletteHTTPException)
async def _not_found_page(request: Request, exc: StarletteHTTPException):
    """Render the HTML 404 page for browser routes; API routes keep JSON errors."""

    if exc.status_code == 404 and not request.url.path.startswith(("/api", "/assets")):
        return render_template(
            request,
            "not_found.html",
            {"page_title": "Not found", "message": None},
            status_code=404,
        )
    return await http_exception_handler(request, exc)


@app.on_event("startup")
async def _startup() -> None:
    """Ensure the database schema exists before serving."""

    try:
        init_db()
    except Exception:  # pragma: no cover - best effort logging
        logger.exception("Database initialisation failed")
        raise
    logger.info("%s %s ready", APP_NAME, API_VERSION)


@app.get("/api", tags=["system"])
def api_info() -> dict[str, str]:
    return {"service": APP_NAME, "version": API_VERSION}


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok", "service": APP_NAME}


UI_STATIC_ROOT = Path(__file__).resolve().parent / "ui" / "static"

app.mount("/assets", StaticFiles(directory=str(UI_STATIC_ROOT), check_dir=False), name="assets")
