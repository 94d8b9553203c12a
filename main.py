import argparse
import logging
import sys
import time
from typing import List, Optional
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from config import SiteConfig, configure_logging
from routers import pages
from services.checker import check_site
from services.loader import ContentLoader
from services.renderer import PageRenderer

logger = logging.getLogger("itinerary_site")


def create_app(config: Optional[SiteConfig] = None) -> FastAPI:
    """
    Build the app. Templates are parsed here, before the app exists, so a
    broken template set raises TemplateLoadError and nothing gets served.
    """
    config = config or SiteConfig.from_env()
    configure_logging(config.log_level)

    renderer = PageRenderer(config.template_dir)
    loader   = ContentLoader(config.content_dir)
    headers  = config.response_headers()

    app = FastAPI(
        title="Itinerary Site",
        description="Server-rendered tour itinerary pages backed by JSON content files",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config   = config
    app.state.renderer = renderer
    app.state.loader   = loader

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in headers.items():
            response.headers.setdefault(name, value)
        return response

    # Registered last so it wraps everything and sees the final status.
    @app.middleware("http")
    async def request_log(request: Request, call_next):
        started = time.perf_counter()
        status  = 500
        try:
            response = await call_next(request)
            status   = response.status_code
            return response
        finally:
            elapsed = (time.perf_counter() - started) * 1000
            logger.info("%s %s %d %.1fms", request.method, request.url.path, status, elapsed)

    @app.exception_handler(StarletteHTTPException)
    async def plain_http_error(request: Request, exc: StarletteHTTPException):
        # plain text bodies; causes stay in the server log
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    app.include_router(pages.router)

    # Static assets at /static/...
    app.mount("/static", StaticFiles(directory=str(config.static_dir), check_dir=False), name="static")

    logger.info(
        "Serving content from %s, templates from %s, static from %s",
        loader.content_dir, renderer.template_dir, config.static_dir,
    )
    return app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the itinerary site.")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Parse templates and render every itinerary, then exit",
    )
    parser.add_argument("--host", help="Override HOST")
    parser.add_argument("--port", type=int, help="Override PORT")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args   = build_parser().parse_args(argv)
    config = SiteConfig.from_env()

    overrides = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if overrides:
        config = config.model_copy(update=overrides)

    if args.check:
        configure_logging(config.log_level)
        return check_site(config)

    app = create_app(config)
    logger.info("Server starting on %s:%d", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
