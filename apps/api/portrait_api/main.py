"""FastAPI entrypoint for the character portrait service."""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from packages.portrait_core.render.assets import default_asset_layout

from .routers.portraits import router as portraits_router

logging.basicConfig(
    level=os.environ.get("PORTRAIT_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("portrait_api")

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

app = FastAPI(title="Character Portrait API", version="0.1.0")

_cors_origins = [o.strip() for o in os.environ.get("PORTRAIT_CORS_ORIGINS", "*").split(",")]
_cors_allow_credentials = "*" not in _cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=_cors_allow_credentials,
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.include_router(portraits_router)


@app.exception_handler(StarletteHTTPException)
async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    detail = str(exc.detail)
    if exc.status_code == 405:
        detail = "Only GET method is allowed"
    return PlainTextResponse(detail, status_code=exc.status_code, headers=getattr(exc, "headers", None))


def _asset_problems() -> list[str]:
    layout = default_asset_layout()
    problems = []
    if not layout.root.is_dir():
        problems.append(f"asset root not found: {layout.root}")
    if not layout.font_path.is_file():
        problems.append(f"font file not found: {layout.font_path}")
    return problems


@app.on_event("startup")
def startup() -> None:
    logger.info("[STARTUP] Portrait API starting up at %s", datetime.now(timezone.utc).isoformat())
    layout = default_asset_layout()
    logger.info("[STARTUP] Asset root: %s", layout.root)
    logger.info("[STARTUP] Font file: %s", layout.font_path)
    for problem in _asset_problems():
        logger.warning("[STARTUP] %s", problem)
    logger.info("[STARTUP] Portrait API startup complete")


@app.on_event("shutdown")
def shutdown() -> None:
    logger.info("[SHUTDOWN] Portrait API stopped")


@app.get("/healthz")
def healthz():
    logger.debug("[HEALTH] Health check requested")
    problems = _asset_problems()
    if problems:
        logger.warning("[HEALTH] Assets unavailable: %s", "; ".join(problems))
        return JSONResponse(status_code=503, content={"status": "error", "detail": "; ".join(problems)})
    return {"status": "ok"}


def serve() -> None:
    """Bind and serve until SIGINT/SIGTERM, then shut down gracefully."""
    import uvicorn

    host = os.environ.get("PORTRAIT_HOST", DEFAULT_HOST)
    port = int(os.environ.get("PORTRAIT_PORT", str(DEFAULT_PORT)))
    logger.info("Server is running on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    serve()
