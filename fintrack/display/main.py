import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx
import uvicorn
from fastapi import FastAPI

from fintrack.core.config import DisplayConfig
from fintrack.core.error_handler import register_exception_handlers
from fintrack.core.logging_config import setup_logging
from fintrack.core.middleware.request_id_middleware import RequestIDMiddleware
from fintrack.display.controller import router as display_router

logger = logging.getLogger(__name__)


def create_display_app(
    config: Optional[DisplayConfig] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Build the display client app. An injected http_client is left open;
    otherwise one is created at startup and closed at shutdown.
    """
    config = config or DisplayConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned = None
        if app.state.http_client is None:
            owned = httpx.AsyncClient(timeout=config.api_timeout)
            app.state.http_client = owned
        try:
            yield
        finally:
            if owned is not None:
                await owned.aclose()
                app.state.http_client = None

    app = FastAPI(
        title="Fintrack Display",
        description="Renders the expenses table",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.http_client = http_client

    register_exception_handlers(app)
    app.add_middleware(RequestIDMiddleware)
    app.include_router(display_router)

    return app


def run() -> None:
    config = DisplayConfig()
    setup_logging(config.log_level)
    logger.info(f"Starting display client on port {config.port}, API at {config.api_base_url}")
    uvicorn.run(create_display_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    run()
