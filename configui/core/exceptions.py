"""
Custom exceptions and exception handlers for the API service.
"""
from typing import List

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from configui.core.logging import logger


class APIError(Exception):
    """Base class for API exceptions."""
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class NotFoundError(APIError):
    """Exception raised when a resource is not found."""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, message=message)


class BadRequestError(APIError):
    """Exception raised for validation or client-side errors."""
    def __init__(self, message: str = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, message=message)


class BindError(BadRequestError):
    """Exception raised when a request body cannot be bound to its schema."""
    def __init__(self, errors: List[str]):
        self.errors = list(errors) or ["body: invalid request body"]
        super().__init__(message=self.errors[0])


# Exception handlers

async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handler for custom API exceptions."""
    logger.error(f"API Error: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message}
    )


async def bind_error_handler(request: Request, exc: BindError) -> Response:
    """
    Handler for request bodies that failed to bind.

    The request is aborted with a bare 400 and no body, unless
    ``EXPLICIT_BIND_ERRORS`` is enabled, in which case the errors are
    reported the same way as other API errors.
    """
    logger.warning(f"Bind Error on {request.method} {request.url.path}: {', '.join(exc.errors)}")

    settings = getattr(request.app.state, "settings", None)
    if settings is not None and settings.EXPLICIT_BIND_ERRORS:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "message": exc.message,
                "errors": exc.errors
            }
        )
    return Response(status_code=exc.status_code)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unhandled exceptions."""
    logger.opt(exception=exc).error(f"Unhandled Exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "Internal server error"
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the exception handlers to the application."""
    app.add_exception_handler(BindError, bind_error_handler)
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)
