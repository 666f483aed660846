from datetime import datetime
from typing import Dict

from pydantic import BaseModel


class HealthCheck(BaseModel):
    status: str = "ok"
    tasks: int = 0


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: datetime
    version: str
    uptime: float
    checks: Dict[str, HealthCheck]
