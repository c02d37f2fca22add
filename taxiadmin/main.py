"""
FastAPI application entry point for CAdministrator.

Taxi fleet administration API: drivers, cars, shifts, expenses and
low-performance alerts.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from taxiadmin.core.config import get_settings
from taxiadmin.db.database import build_engine, build_session_maker, init_db
from taxiadmin.api.v1 import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.

    Owns the database engine: created on startup, disposed on shutdown.
    """
    settings = get_settings()
    engine = build_engine(settings)
    app.state.engine = engine
    app.state.session_maker = build_session_maker(engine)

    if settings.create_tables_on_startup:
        await init_db(engine)
        logger.info("Database tables created")

    yield

    await engine.dispose()


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log unexpected database failures and answer with a generic 500."""
    logger.exception(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_application() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="""
        ## CAdministrator

        Administration API for a taxi fleet.

        - **Drivers, cars and shifts (skift)** with Norwegian field names
        - **Expenses (utgifter)** per driver and car
        - **Alerts (varsler)** for shifts below the performance thresholds:
          km opptatt < 40, opptatt% < 20 %, antall turer < 10,
          lønnsgrunnlag < 2000
        """,
        version=settings.app_version,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


# Create application instance
app = create_application()


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/")
async def root():
    """Root endpoint with API info."""
    settings = get_settings()
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": f"{settings.api_v1_prefix}/docs",
        "openapi": f"{settings.api_v1_prefix}/openapi.json",
    }
