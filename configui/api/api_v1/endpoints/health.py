"""
Health resource API endpoints.
"""
from fastapi import APIRouter, Request, status

from configui.core.binding import bind_json, json_body_spec
from configui.core.logging import logger
from configui.models.schemas import Health, StatusResponse


router = APIRouter()


@router.get(
    "",
    response_model=Health,
    status_code=status.HTTP_200_OK,
    summary="Get health",
    responses={200: {"description": "Current health"}}
)
async def get_health() -> Health:
    """
    Return the current health.
    """
    return Health(health="foo")


@router.post(
    "",
    response_model=StatusResponse,
    status_code=status.HTTP_200_OK,
    summary="Set health",
    responses={400: {"description": "Request body could not be bound"}},
    openapi_extra=json_body_spec(Health, "New health")
)
async def set_health(request: Request) -> StatusResponse:
    """
    Accept a new health value.

    The value is logged and discarded.
    """
    data = (await bind_json(request, Health)).unwrap()

    logger.info(f"Got: {data!r}")

    return StatusResponse(status="ok")
