"""
Page Server - Main Application Entry Point

Renders a single Jinja2 page and injects references to frontend assets
built by Vite:
- Development: scripts point at the running Vite dev server
- Production: hashed files are resolved via the build manifest and
  served from the build output directory
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from vitepage.config import Settings, get_settings
from vitepage.api import router
from vitepage.assets import AssetResolver, load_manifest
from vitepage.errors import StartupError
from vitepage.rendering import PageRenderer

logger = structlog.get_logger()


def setup_logging(settings: Optional[Settings] = None):
    """Configure structured logging."""
    settings = settings or get_settings()

    # Set log level
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure root logger
    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        stream=sys.stdout
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = app.state.settings

    logger.info(
        "Page server started",
        mode="development" if settings.is_development else "production",
        port=settings.api_port,
    )

    yield

    logger.info("Page server stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Everything the request handlers read (manifest, resolver, parsed
    template) is created here and never modified afterwards. Raises a
    StartupError subclass if the manifest or template cannot be loaded.
    """
    settings = settings or get_settings()

    manifest = None
    if settings.is_development:
        logger.info("Development mode: Skipping manifest load.")
    else:
        manifest = load_manifest(settings.manifest_path)

    resolver = AssetResolver(
        is_development=settings.is_development,
        dev_server=settings.vite_dev_server,
        static_url_path=settings.static_url_path,
        manifest=manifest,
        manifest_path=str(settings.manifest_path),
    )
    renderer = PageRenderer(settings.templates_dir, settings.template_name, resolver)

    app = FastAPI(
        title="Vite Page Server",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.renderer = renderer

    # Built assets are only served by us in production
    if not settings.is_development:
        app.mount(
            settings.static_url_path,
            StaticFiles(directory=settings.dist_dir),
            name="static",
        )
        logger.info(
            f"Serving production static assets from {settings.static_url_path}/ "
            f"mapped to ./{settings.dist_dir}"
        )

    app.include_router(router)

    return app


def main():
    """Start the page server. Exits with status 1 on any startup error."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings)

    logger.info(
        f"Starting app: APP_ENV='{settings.app_env}', "
        f"IsDevelopment={settings.is_development}"
    )

    try:
        app = create_app(settings)
    except StartupError as e:
        logger.error(f"FATAL: {e}")
        sys.exit(1)

    logger.info(f"Server listening on http://localhost:{settings.api_port}")
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
