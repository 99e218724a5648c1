"""
Readiness resource API endpoints.
"""
from fastapi import APIRouter, Request, status

from configui.core.binding import bind_json, json_body_spec
from configui.core.logging import logger
from configui.models.schemas import Ready, StatusResponse


router = APIRouter()


@router.get(
    "",
    response_model=Ready,
    status_code=status.HTTP_200_OK,
    summary="Get readiness"
)
async def get_ready() -> Ready:
    return Ready(ready="bar")


@router.post(
    "",
    response_model=StatusResponse,
    status_code=status.HTTP_200_OK,
    summary="Set readiness",
    responses={400: {"description": "Request body could not be bound"}},
    openapi_extra=json_body_spec(Ready, "New readiness")
)
async def set_ready(request: Request) -> StatusResponse:
    data = (await bind_json(request, Ready)).unwrap()

    logger.info(f"Got: {data!r}")

    return StatusResponse(status="ok")
