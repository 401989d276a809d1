"""
Health check response schema for the API and load balancer checks.
"""
from typing import Dict, Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """
    Service health.

    status is "degraded" when any dependency check is not "ok"; failing
    checks carry the error text, e.g. {"database": "error: ..."}.
    """
    status: Literal["ok", "degraded"]
    service: str
    version: str
    uptime: str
    checks: Dict[str, str] = {}
