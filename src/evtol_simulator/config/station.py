"""Charging station configuration."""

from pydantic import BaseModel, Field


class StationConfig(BaseModel):
    """Shared charging station inputs."""

    charging_bays: int = Field(default=3, ge=1, description="Bays that can charge a vehicle simultaneously")
