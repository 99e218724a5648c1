from configui.models.schemas.common import StatusResponse
from configui.models.schemas.health import Health
from configui.models.schemas.ready import Ready

__all__ = ["Health", "Ready", "StatusResponse"]
