from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from person_api.api.v1 import health, people
from person_api.core.config import settings
from person_api.core.db import engine, init_db
from person_api.core.errors import register_exception_handlers
from person_api.core.logging_config import setup_logging

logger = logging.getLogger(__name__)

PAGINATION_HEADERS = ["X-Total-Count", "X-Page-Number", "X-Page-Size"]

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"{settings.PROJECT_NAME} started - database backend: {engine.dialect.name}")
    yield

def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_DIR or None)

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.API_VERSION, lifespan=lifespan)

    # error boundary first so cors wraps it and error responses still get cors headers
    register_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=PAGINATION_HEADERS,
    )

    @app.get("/")
    def read_root():
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(people.router, prefix="/api/persons", tags=["persons"])

    return app

app = create_app()
