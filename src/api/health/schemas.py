"""
Pydantic v2 schemas for health check API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthCheckResponse(BaseModel):
    """Response for the liveness endpoint"""
    model_config = ConfigDict()

    status: str = Field(default="OK", description="Always OK while the process serves requests")
    timestamp: str = Field(description="Check time, ISO-8601 UTC")
