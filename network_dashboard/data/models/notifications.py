from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

Severity = Literal["success", "error", "warning", "info"]


class Notification(BaseModel):
    """A transient message shown to the operator."""
    id: str = Field(description="Unique notification identifier")
    message: str = Field(min_length=1, description="Trimmed message text")
    severity: Severity = Field(default="info", description="Drives presentation styling")
    created_at: datetime = Field(default_factory=datetime.now, description="When the message was pushed")
    duration_ms: Optional[int] = Field(default=None, ge=0, description="Auto-dismiss delay; 0 keeps the message until dismissed")
