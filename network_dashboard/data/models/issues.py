from __future__ import annotations

from datetime import date
from typing import List, Literal

from pydantic import BaseModel, Field

from .movements import Priority

IssueKind = Literal["orders", "shipments", "SKUs"]


class Issue(BaseModel):
    """An operational issue reported against the network."""
    id: str = Field(description="Unique issue identifier")
    description: str = Field(description="What went wrong")
    severity: Priority = Field(description="Issue severity")
    affected: int = Field(ge=0, description="Number of affected orders, shipments or SKUs")
    estimated_resolution: date = Field(description="Expected resolution date")


class IssueGroup(BaseModel):
    """Issues of one kind, rendered as a single dashboard widget."""
    title: str = Field(description="Widget title, e.g. Order Issues")
    affected_kind: IssueKind = Field(description="What the affected count refers to")
    issues: List[Issue] = Field(default_factory=list, description="Issues in the group")
