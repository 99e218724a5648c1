"""
Common schemas used across the API.
"""
from pydantic import BaseModel, ConfigDict


class StatusResponse(BaseModel):
    """Acknowledgment returned by every accepted write."""
    status: str = "ok"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok"
            }
        }
    )
