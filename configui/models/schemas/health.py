"""
Schemas for the health resource.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Health(BaseModel):
    """Current health of the service."""
    health: StrictStr = Field(..., description="Health description")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "health": "very fit"
            }
        }
    )
