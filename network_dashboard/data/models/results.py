from __future__ import annotations

from pydantic import BaseModel, Field


class OperationResult(BaseModel):
    """Uniform outcome of a movement store command."""
    success: bool = Field(description="Whether the command completed")
    message: str = Field(description="Human-readable outcome")
