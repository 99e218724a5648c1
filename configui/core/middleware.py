"""
HTTP middleware installed by the application factory.
"""
import time

from fastapi import FastAPI, Request

from configui.core.config import Settings
from configui.core.exceptions import register_exception_handlers
from configui.core.logging import logger


async def log_request_time(request: Request, call_next):
    """
    Log method, path, status and latency of every request.
    """
    start_time = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        process_time = time.perf_counter() - start_time
        logger.error(f"{request.method} {request.url.path} -> 500 ({process_time:.4f}s)")
        raise

    process_time = time.perf_counter() - start_time
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({process_time:.4f}s)")
    response.headers["X-Process-Time"] = f"{process_time:.6f}"

    return response


def install_middleware(app: FastAPI, settings: Settings) -> None:
    """
    Build the request pipeline: recovery handlers, then access logging.
    """
    register_exception_handlers(app)

    if settings.ACCESS_LOG:
        app.middleware("http")(log_request_time)
