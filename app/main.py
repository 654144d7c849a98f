"""
FastAPI application entry point for the Slide Deck API.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import setup_error_handlers
from app.api.v1 import v1_router
from app.api.v1.system import router as system_router
from app.infra.config.database import Database
from app.infra.config.logging_config import get_logger, setup_logging
from app.infra.config.settings import get_settings
from app.infra.middleware.request_context import RequestContextMiddleware


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        database: Store to serve from. Built from settings when omitted;
            tests pass their own in-memory instance.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        logger = get_logger("app")
        logger.info(
            "app.startup",
            app_name=settings.app_name,
            environment=settings.environment,
        )

        db = app.state.database
        if db.engine is None:
            await db.initialize()
        await db.create_all()

        yield

        await db.close()
        logger.info("app.shutdown", app_name=settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        description="Slide deck editor and presentation service",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.database = database or Database(
        settings.database_url, echo=settings.debug_sql
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    app.include_router(v1_router, prefix="/api")
    app.include_router(system_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )
