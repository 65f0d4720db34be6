from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field, PositiveInt

MovementStatus = Literal["pending", "approved", "rejected"]
Priority = Literal["high", "medium", "low"]

PENDING: MovementStatus = "pending"
APPROVED: MovementStatus = "approved"
REJECTED: MovementStatus = "rejected"


class Movement(BaseModel):
    """A proposed inventory transfer between two distribution centers."""
    id: str = Field(frozen=True, min_length=1, description="Unique movement identifier")
    sku: str = Field(description="Stock keeping unit code")
    description: str = Field(description="Free-text reason for the transfer")
    category: Optional[str] = Field(default=None, description="Movement category, e.g. demand-balancing")
    quantity: PositiveInt = Field(description="Units to transfer")
    estimated_savings: Decimal = Field(ge=0, description="Estimated savings in USD")
    priority: Priority = Field(description="Movement priority")
    origin_dc: str = Field(description="Distribution center shipping the stock")
    destination_dc: str = Field(description="Distribution center receiving the stock")
    created_at: datetime = Field(description="When the movement was suggested")
    required_by: datetime = Field(description="Latest date the transfer must complete")
    status: MovementStatus = Field(default=PENDING, description="Decision status")
    approved_at: Optional[datetime] = Field(default=None, description="When the movement was approved")
