from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

from ..data.interface import DataAccess, MovementBackend
from ..data.models import IssueGroup, Movement, OperationResult, Severity
from ..logging import get_logger
from .export import export_movements_csv, export_movements_to_csv
from .formatting import describe_movement
from .locations import LocationDirectory
from .movement_store import MovementStore
from .notifications import NotificationQueue
from .projector import MovementView, ViewProjector

logger = get_logger(__name__)


class DashboardContext:
    """Everything the movement panel needs, constructed once per session.

    Routes command outcomes into the notification queue. The queue may be
    absent; detail requests then fall back to the blocking `alert` callable.
    """

    def __init__(
        self,
        store: MovementStore,
        locations: LocationDirectory,
        notifications: Optional[NotificationQueue] = None,
        issue_groups: Optional[List[IssueGroup]] = None,
        alert: Callable[[str], None] = print,
    ) -> None:
        self.store = store
        self.locations = locations
        self.notifications = notifications
        self.issue_groups = issue_groups or []
        self.projector = ViewProjector(resolve_name=locations)
        self.alert = alert
        self._unsubscribe = store.subscribe(
            lambda snap: logger.debug(f"store changed: {len(snap.movements)} movements, loading={snap.loading}")
        )

    @classmethod
    def from_data_access(
        cls,
        data_access: DataAccess,
        backend: Optional[MovementBackend] = None,
        notifications: Optional[NotificationQueue] = None,
        **kwargs,
    ) -> "DashboardContext":
        return cls(
            store=MovementStore(data_access.list_movements(), backend=backend),
            locations=LocationDirectory(data_access.list_distribution_centers()),
            notifications=notifications if notifications is not None else NotificationQueue(),
            issue_groups=data_access.list_issue_groups(),
            **kwargs,
        )

    @property
    def view(self) -> MovementView:
        return self.projector.view(self.store)

    # ---------- commands ----------

    async def approve(self, movement_id: str) -> OperationResult:
        result = await self.store.approve(movement_id)
        self._report(result, success_severity="success")
        return result

    async def reject(self, movement_id: str) -> OperationResult:
        result = await self.store.reject(movement_id)
        self._report(result, success_severity="warning")
        return result

    def show_details(self, movement: Movement) -> None:
        details = describe_movement(movement, self.locations)
        if self.notifications is None:
            self.alert(details)
            return
        self.notifications.info(details, duration_ms=0)

    def export_text(self) -> Optional[str]:
        """CSV text for the current projection, or None when it is empty."""
        return export_movements_csv(self.view.items(), self.locations)

    def export(self, filename: Optional[str] = None, directory: Optional[str | Path] = None) -> Optional[Path]:
        movements = self.view.items()
        try:
            path = export_movements_to_csv(movements, self.locations, filename=filename, directory=directory)
        except OSError:
            logger.exception("Export failed")
            self._notify("error", "Failed to export data")
            raise
        if path is not None:
            self._notify("success", f"Exported {len(movements)} movements to CSV")
        return path

    def close(self) -> None:
        """Tear down the session: drop the store subscription and pending notifications."""
        self._unsubscribe()
        if self.notifications is not None:
            self.notifications.clear()

    # ---------- helpers ----------

    def _report(self, result: OperationResult, success_severity: Severity) -> None:
        self._notify(success_severity if result.success else "error", result.message)

    def _notify(self, severity: Severity, message: str) -> None:
        if self.notifications is not None:
            self.notifications.push(message, severity)
