"""
Schemas for the readiness resource.
"""
from pydantic import BaseModel, Field, StrictStr


class Ready(BaseModel):
    """Current readiness of the service."""
    ready: StrictStr = Field(..., description="Readiness description")
