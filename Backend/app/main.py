# Backend/app/main.py
from __future__ import annotations

# --- ensure project root is on sys.path so `api.*`, `app.*` and `services.*` are importable ---
import sys
from pathlib import Path
THIS_FILE = Path(__file__).resolve()
BACKEND_ROOT = THIS_FILE.parents[1]  # .../Backend
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))
# -------------------------------------------------------------------------

from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

# --- Logging & request-id ---
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response as StarletteResponse

from app.config import Settings, get_settings
from app.core.logging import configure_logging, logger
from app.core.request_id import clear_request_id, new_request_id, set_request_id
from app.templating import build_templates

from api.routers.feed import router as feed_router
from api.routers.posts import router as posts_router


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        req_id = request.headers.get("x-request-id") or new_request_id()
        set_request_id(req_id)

        logger.info("request_started", method=request.method, path=str(request.url.path))
        try:
            response: StarletteResponse = await call_next(request)
        except Exception as exc:
            logger.error("request_exception", error=str(exc.__class__.__name__))
            clear_request_id()
            raise
        logger.info("request_ended", status_code=response.status_code)
        response.headers["X-Request-Id"] = req_id
        clear_request_id()
        return response


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=dict(exc.headers or {}),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_exception", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    # Configureer logging voor de API
    configure_logging(
        service_name=settings.SERVICE_NAME,
        level=settings.LOG_LEVEL,
        json_output=settings.LOG_JSON,
    )

    app = FastAPI(
        title="Posts",
        version=settings.APP_VERSION,
        docs_url=None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.templates = build_templates(settings)

    app.add_middleware(RequestIdMiddleware)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # --- Health endpoint ---
    @app.get("/healthz")
    async def healthz():
        return {"status": "healthy"}

    app.include_router(posts_router)
    app.include_router(feed_router)

    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")
    else:
        logger.warning("static_dir_missing", path=str(static_dir))

    logger.info(
        "app_configured",
        posts_dir=str(settings.POSTS_DIR),
        extension=settings.POST_EXTENSION,
    )
    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("server_starting", host=settings.HOST, port=settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
