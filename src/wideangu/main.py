"""FastAPI application factory.

Learn: App factory pattern — create_app() returns a configured FastAPI
instance. Lifespan logs startup/shutdown. Middleware, CORS, the HTTP
routers and the realtime WebSocket route are all registered here, so
both surfaces share one listener and one port.
"""

import logging
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wideangu import __version__
from wideangu.api import api_router, health_router
from wideangu.catalog import PROFESSIONAL_TYPES, SERVICE_CATEGORIES
from wideangu.config import settings

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle.

    Learn: Anything before `yield` runs at startup, after `yield` runs
    at shutdown. The catalog is already built at import time, so startup
    only announces what's being served.
    """
    base_url = f"http://localhost:{settings.port}"
    logger.info(
        "wideangu.starting",
        service=settings.service_name,
        version=__version__,
        environment=settings.environment,
        server=base_url,
        api=f"{base_url}/api/v1",
        health=f"{base_url}/health",
        professional_types=len(PROFESSIONAL_TYPES),
        categories=len(SERVICE_CATEGORIES),
    )

    yield

    logger.info("wideangu.shutdown")


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="Wide Angu",
        description="Media Professionals Marketplace API",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: CORS → RequestId → Security → handler

    from wideangu.middleware.request_id import RequestIdMiddleware
    from wideangu.middleware.security import SecurityHeadersMiddleware

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # /health sits at the root; everything else under /api/v1
    app.include_router(health_router, tags=["health"])
    app.include_router(api_router)

    # Realtime rooms over WebSocket, same port
    from wideangu.realtime.websocket import router as ws_router
    app.include_router(ws_router)

    return app


# Default app instance (used by uvicorn: wideangu.main:app)
app = create_app()


def run() -> None:
    """Console entry point — serve the app until terminated."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
