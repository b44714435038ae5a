# app/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.db import create_db_and_tables, get_engine
from app.routers import barbers_routes
from app.schemas import HealthResponse

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _initialize_database() -> None:
    settings = get_settings()
    if settings.demo_mode:
        logger.info("No DATABASE_URL configured, serving demo data")
        return
    logger.info("Creating database tables")
    create_db_and_tables(get_engine())


@asynccontextmanager
async def lifespan(app: FastAPI):
    _initialize_database()
    yield


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_application() -> FastAPI:
    settings = get_settings()
    _configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

    @app.get("/health", response_model=HealthResponse)
    def health_check():
        return {"status": "ok", "demo_mode": get_settings().demo_mode}

    app.include_router(barbers_routes.router)
    app.add_exception_handler(Exception, _unhandled_error)

    return app


app = create_application()
