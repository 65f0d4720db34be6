from .data_filters import (
    MovementFilters,
    PriorityFilter,
    SortDirection,
    SortKey,
    StatusFilter,
)

from .movements import (
    APPROVED,
    PENDING,
    REJECTED,
    Movement,
    MovementStatus,
    Priority,
)
from .locations import DcStatus, DistributionCenter
from .issues import Issue, IssueGroup, IssueKind
from .notifications import Notification, Severity
from .results import OperationResult

__all__ = [
    # Filter classes
    "MovementFilters",
    "PriorityFilter",
    "SortDirection",
    "SortKey",
    "StatusFilter",
    # Domain models
    "Movement",
    "MovementStatus",
    "Priority",
    "PENDING",
    "APPROVED",
    "REJECTED",
    "DistributionCenter",
    "DcStatus",
    "Issue",
    "IssueGroup",
    "IssueKind",
    "Notification",
    "Severity",
    # Command results
    "OperationResult",
]
