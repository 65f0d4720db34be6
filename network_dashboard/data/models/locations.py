from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

DcStatus = Literal["healthy", "warning", "critical"]


class DistributionCenter(BaseModel):
    """Reference data for a distribution center shown on the network map."""
    id: str = Field(description="Unique distribution center identifier")
    name: str = Field(description="Display name")
    code: str = Field(description="Short site code")
    latitude: float = Field(description="Latitude coordinate")
    longitude: float = Field(description="Longitude coordinate")
    status: DcStatus = Field(description="Operational health")
    capacity: int = Field(ge=0, description="Current utilisation in capacity units")
    max_capacity: int = Field(gt=0, description="Nominal capacity in capacity units")
    orders: int = Field(ge=0, description="Open orders at the site")
    issues: int = Field(ge=0, description="Open issues at the site")
    address: str = Field(description="Street address")
    manager: str = Field(description="Site manager")
