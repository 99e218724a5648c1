"""
Main application entry point for the Config UI Example service.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from configui.api.api_v1.api import api_router
from configui.api.docs import create_docs_router
from configui.core.config import Settings, get_settings
from configui.core.logging import logger, setup_logging
from configui.core.middleware import install_middleware


# Setup application logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handle startup and shutdown events for the application.
    """
    settings = app.state.settings
    logger.info(f"Serving Swagger UI at {settings.SWAGGER_PATH} for API {settings.PROJECT_NAME}")
    logger.info(f"{settings.PROJECT_NAME} started")
    yield
    logger.info(f"{settings.PROJECT_NAME} shutting down...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=settings.API_VERSION,
        docs_url=None,  # Swagger UI is served by the docs router
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan
    )
    app.state.settings = settings

    install_middleware(app, settings)

    app.include_router(api_router, prefix=settings.API_V1_STR)
    app.include_router(create_docs_router(settings))

    return app


app = create_app()


if __name__ == "__main__":
    from configui.server import run

    raise SystemExit(run(app=app))
