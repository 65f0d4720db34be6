# network_dashboard/data/interface.py
from __future__ import annotations

from typing import List, Protocol

from .models import DistributionCenter, IssueGroup, Movement


# ---- Seed data protocol ----

class DataAccess(Protocol):
    """
    Backend-agnostic contract for the dashboard's seed data.

    Implementations return fresh copies on every call; callers own the
    returned models and may mutate them without affecting the source.
    """

    def list_distribution_centers(self) -> List[DistributionCenter]:
        """List all distribution centers."""
        ...

    def list_movements(self) -> List[Movement]:
        """List the suggested inventory movements, in seed order."""
        ...

    def list_issue_groups(self) -> List[IssueGroup]:
        """List issue groups (orders, inbound, inventory)."""
        ...


# ---- Movement command protocol ----

class MovementBackend(Protocol):
    """
    Remote side of the movement workflow.

    Each call either completes or raises; any exception makes the movement
    store roll back its optimistic change.
    """

    async def approve(self, movement_id: str) -> None:
        """Confirm an approval."""
        ...

    async def reject(self, movement_id: str) -> None:
        """Confirm a rejection."""
        ...
