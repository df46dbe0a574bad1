import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from fintrack.core.config import ApiConfig
from fintrack.core.db import Database
from fintrack.core.error_handler import register_exception_handlers
from fintrack.core.logging_config import setup_logging
from fintrack.core.middleware.request_id_middleware import RequestIDMiddleware
from fintrack.modules.expenses.controller import router as expenses_router

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[ApiConfig] = None, database: Optional[Database] = None
) -> FastAPI:
    """
    Build the API service. A Database passed in is used as-is and left open;
    otherwise one is built from config at startup and disposed at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned = None
        if getattr(app.state, "database", None) is None:
            settings = config or ApiConfig()
            owned = Database(settings.database_url)
            app.state.database = owned
            logger.info("Database engine created")
        try:
            yield
        finally:
            if owned is not None:
                await owned.close()
                app.state.database = None

    app = FastAPI(
        title="Fintrack API",
        description="Read-only expenses API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database

    register_exception_handlers(app)

    # Middlewares
    app.add_middleware(RequestIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(expenses_router)

    @app.get("/ping")
    async def ping(request: Request) -> dict[str, str]:
        return {"status": "ok", "request_id": str(request.state.request_id)}

    return app


def run() -> None:
    config = ApiConfig()
    setup_logging(config.log_level)
    logger.info(f"Starting API service on port {config.port}")
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    run()
