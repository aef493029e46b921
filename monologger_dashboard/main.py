import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .routers import dashboard_router
from .services import DashboardController, DashboardFetcher, get_date_formatter

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    fetcher: Optional[DashboardFetcher] = None,
) -> FastAPI:
    """Create the dashboard API.

    The dashboard is activated once on startup; clients trigger later
    refreshes explicitly.
    """
    settings = settings or get_settings()
    format_date = get_date_formatter(settings.display_locale)
    if fetcher is None:
        fetcher = DashboardFetcher(
            settings.reporting_base_url,
            timeout=settings.request_timeout_seconds,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        controller = DashboardController(fetcher, format_date=format_date)
        app.state.dashboard = controller
        logger.info(f"Reading statistics from {fetcher.base_url}")
        controller.activate()
        yield
        await controller.close()

    app = FastAPI(
        title="MonoLogger Dashboard API",
        description="Load state and view model for the MonoLogger statistics dashboard",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(dashboard_router, prefix="/api")

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


logging.basicConfig(level=get_settings().log_level.upper())

app = create_app()


def run():
    """Serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
