from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

StatusFilter = Literal["all", "pending", "approved", "rejected"]
PriorityFilter = Literal["all", "high", "medium", "low"]
SortKey = Literal[
    "id", "sku", "description", "category", "status", "priority",
    "origin_dc", "destination_dc", "quantity", "estimated_savings",
    "created_at", "required_by",
]
SortDirection = Literal["asc", "desc"]


class MovementFilters(BaseModel):
    """Search, filter and sort parameters for the movement table."""
    search: str = Field(default="", description="Case-insensitive text matched against SKU, description and DC names")
    status: StatusFilter = Field(default="all", description="Status filter ('all' passes everything)")
    priority: PriorityFilter = Field(default="all", description="Priority filter ('all' passes everything)")
    sort_by: SortKey = Field(default="created_at", description="Active sort column")
    sort_direction: SortDirection = Field(default="desc", description="Active sort direction")
