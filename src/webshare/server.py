"""webshare HTTP server.

``create_app(config)`` builds a self-contained FastAPI application: the config
and renderer hang off ``app.state`` and every route is registered here, so two
apps with different roots can coexist in one process (the tests rely on this).

Route table:

    GET  /                  -> 302 /ui/
    GET  /ui/<path>         listing page
    POST /upload/<path>     multipart upload (field "file")
    GET  /fs/<path>         raw download / plain index
    GET  /static/<path>     bundled CSS
    GET  /api/files/browse  JSON listing
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from webshare.api.files import router as files_api_router
from webshare.config import ServerConfig, app_version, check_port_available
from webshare.errors import WebshareError
from webshare.fileserver import router as fileserver_router
from webshare.renderer import ViewRenderer
from webshare.views import router as views_router

logger = logging.getLogger(__name__)


def create_app(config: ServerConfig) -> FastAPI:
    """Build the application for *config*."""
    app = FastAPI(
        title="webshare",
        description="Share a directory on the local network: browse, download, upload.",
        version=app_version(),
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
    )

    app.state.config = config
    app.state.renderer = ViewRenderer(config.template_dir, title=config.title)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        """Log one line per request: method, path, status, elapsed time."""
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        client = request.client.host if request.client else "-"
        logger.info(
            "%s %s %s -> %d (%.1f ms)",
            client,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.exception_handler(WebshareError)
    async def webshare_error_handler(request: Request, exc: WebshareError):
        level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logger.log(level, "%s %s failed: %s", request.method, request.url.path, exc.message)
        if request.url.path.startswith("/api/"):
            return JSONResponse({"detail": exc.message}, status_code=exc.status_code)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    app.mount("/static", StaticFiles(directory=config.static_dir), name="static")

    app.include_router(files_api_router, prefix="/api")
    app.include_router(fileserver_router)
    app.include_router(views_router)

    return app


def run_server(config: ServerConfig) -> None:
    """Serve *config* until interrupted.

    Raises:
        ConfigError: the bind address is already in use.
    """
    import uvicorn

    check_port_available(config.host, config.port)
    app = create_app(config)

    shown_host = "localhost" if config.host in ("0.0.0.0", "::") else config.host
    logger.info("start webshare ...")
    logger.info("Sharing %s at http://%s:%d/", config.root_path, shown_host, config.port)

    # log_config=None keeps the Rich handler installed by setup_logging().
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)
