# app/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.api.api import api_router
from app.api.error_handlers import register_error_handlers
from app.db.init_db import init_db

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield
    logger.info("%s shutting down", settings.PROJECT_NAME)


def create_application() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ERRORS ----------
    register_error_handlers(app)

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app


app = create_application()
