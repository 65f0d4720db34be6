from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List

from pydantic import BaseModel, Field

from ..data.models import PENDING, DistributionCenter, IssueGroup, Movement, Priority

SEVERITY_LABELS = {
    "high": "Requires immediate attention",
    "medium": "Moderate priority issues",
    "low": "Low priority, monitor",
}


class IssueSummary(BaseModel):
    """Roll-up of one issue group for its dashboard widget."""
    title: str = Field(description="Widget title")
    severity: Priority = Field(description="Overall severity of the group")
    label: str = Field(description="Human-readable severity label")
    count: int = Field(description="Number of issues in the group")
    affected: int = Field(description="Total affected orders, shipments or SKUs")


class MovementImpact(BaseModel):
    """What the pending movements are worth."""
    pending_count: int
    pending_savings: Decimal
    high_priority_pending: int
    approved_savings: Decimal


def group_severity(group: IssueGroup) -> Priority:
    """Three or more high issues make the group high; one or more make it medium."""
    high = sum(1 for issue in group.issues if issue.severity == "high")
    if high >= 3:
        return "high"
    if high >= 1:
        return "medium"
    return "low"


def summarize_issues(groups: Iterable[IssueGroup]) -> List[IssueSummary]:
    summaries = []
    for group in groups:
        severity = group_severity(group)
        summaries.append(IssueSummary(
            title=group.title,
            severity=severity,
            label=SEVERITY_LABELS[severity],
            count=len(group.issues),
            affected=sum(issue.affected for issue in group.issues),
        ))
    return summaries


def capacity_utilisation(dc: DistributionCenter) -> float:
    """Utilisation as a percentage of nominal capacity; may exceed 100."""
    return dc.capacity / dc.max_capacity * 100


def movement_impact(movements: Iterable[Movement]) -> MovementImpact:
    movements = list(movements)
    pending = [m for m in movements if m.status == PENDING]
    return MovementImpact(
        pending_count=len(pending),
        pending_savings=sum((m.estimated_savings for m in pending), Decimal(0)),
        high_priority_pending=sum(1 for m in pending if m.priority == "high"),
        approved_savings=sum((m.estimated_savings for m in movements if m.status == "approved"), Decimal(0)),
    )
