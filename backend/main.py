from __future__ import annotations

import logging
import os
import time
import uuid
from pathlib import Path

from dotenv import load_dotenv

# Load .env from backend directory so DATABASE_URL etc. are available
load_dotenv(Path(__file__).resolve().parent / ".env")

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from layouts import get_layout, list_layouts
from models import LayoutSummary
from rendering.component_config import ComponentClusters
from routes.sites import CMS_ENABLED, router as sites_router

# Version for /health and the startup log (Render sets RENDER_GIT_COMMIT)
VERSION = (os.environ.get("RENDER_GIT_COMMIT") or "").strip() or "unknown"

_LOG = logging.getLogger("uvicorn.error")

app = FastAPI(title="IR Sites Backend", version="0.1.0")

# CORS: use ALLOWED_ORIGINS env (comma-separated) if set, else local dev origins
_origins_env = os.environ.get("ALLOWED_ORIGINS", "").strip()
if _origins_env:
    ALLOWED_ORIGINS = [o.strip() for o in _origins_env.split(",") if o.strip()]
else:
    ALLOWED_ORIGINS = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        _LOG.info(
            "request_id=%s method=%s path=%s status=%s duration_ms=%.0f",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        response.headers["X-Request-Id"] = request_id
        return response


app.add_middleware(RequestLogMiddleware)
app.include_router(sites_router)


@app.on_event("startup")
def startup_log() -> None:
    port = os.environ.get("PORT", "8010")
    host = os.environ.get("HOST", "127.0.0.1")
    _LOG.info(
        "Backend starting on http://%s:%s (CMS enabled: %s) version=%s layouts=%s",
        host, port, CMS_ENABLED, VERSION, ",".join(layout.slug for layout in list_layouts()),
    )
    if not CMS_ENABLED:
        _LOG.warning("CMS_ENABLED is off. Sites render without CMS press releases or leadership.")


@app.get("/health")
def health():
    return {
        "status": "ok",
        "cms_enabled": CMS_ENABLED,
        "version": VERSION,
    }


@app.get("/version")
def version():
    return {
        "version": VERSION,
        "source_file": str(Path(__file__).resolve()),
        "render_service_name": os.getenv("RENDER_SERVICE_NAME", ""),
        "component_clusters": ComponentClusters.names(),
    }


@app.options("/layouts")
def layouts_options():
    """CORS preflight; ensure OPTIONS /layouts returns 200."""
    return Response(status_code=200)


@app.get("/layouts", response_model=list[LayoutSummary])
def get_layouts_list() -> list[LayoutSummary]:
    """Return available site layouts for the template picker."""
    return [layout.summary() for layout in list_layouts()]


@app.get("/layouts/{slug}", response_model=LayoutSummary)
def get_layout_detail(slug: str) -> LayoutSummary:
    layout = get_layout(slug)
    if layout is None:
        raise HTTPException(status_code=404, detail=f"Unknown layout: {slug}")
    return layout.summary()


def get_app() -> FastAPI:
    """
    Convenience accessor for ASGI servers.
    """
    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=8010,
        reload=True,
    )
