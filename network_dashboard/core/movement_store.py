"""
Movement store.

Owns the canonical movement collection and runs approve/reject as a
three-phase protocol against a MovementBackend:

1. capture the prior value and apply the optimistic change (before the
   first suspension point, so readers see it immediately);
2. await the backend;
3. commit, or revert to the captured value if the backend raised.

Commands never raise to callers; they return an OperationResult and keep the
last failure message in `error`. Commands on the same movement id are
serialized; commands on different ids run concurrently.
"""
from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager, contextmanager
from datetime import datetime
from typing import Awaitable, Callable, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from ..data.backends.simulated import SimulatedMovementBackend
from ..data.interface import MovementBackend
from ..data.models import APPROVED, PENDING, Movement, OperationResult
from ..logging import get_logger
from .errors import ConflictError, MovementError, OperationFailure, ValidationError

logger = get_logger(__name__)


class StoreSnapshot(BaseModel):
    """Read-only view of the store handed to subscribers."""
    movements: Tuple[Movement, ...] = Field(description="Active movements in collection order")
    loading: bool = Field(description="True while any command is in flight")
    error: Optional[str] = Field(default=None, description="Most recent failure message")
    pending_count: int = Field(description="Number of pending movements")


Listener = Callable[[StoreSnapshot], None]


class MovementStore:
    def __init__(self, movements: Iterable[Movement] = (), backend: Optional[MovementBackend] = None) -> None:
        self._movements: List[Movement] = [m.model_copy() for m in movements]
        self._backend = backend if backend is not None else SimulatedMovementBackend()
        self._in_flight = 0
        self._error: Optional[str] = None
        self._locks: Dict[str, asyncio.Lock] = {}
        self._lock_users: Dict[str, int] = {}
        self._listeners: List[Listener] = []

    # ---------- queries ----------

    @property
    def movements(self) -> Tuple[Movement, ...]:
        return tuple(self._movements)

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def error(self) -> Optional[str]:
        return self._error

    def pending_count(self) -> int:
        return sum(1 for m in self._movements if m.status == PENDING)

    def get(self, movement_id: str) -> Optional[Movement]:
        index = self._index_of(movement_id)
        return None if index is None else self._movements[index]

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            movements=self.movements,
            loading=self.loading,
            error=self._error,
            pending_count=self.pending_count(),
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with a fresh snapshot after every state change.

        Returns a callable that removes the subscription.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---------- commands ----------

    async def approve(self, movement_id: str) -> OperationResult:
        return await self._run("approve", movement_id, self._approve)

    async def reject(self, movement_id: str) -> OperationResult:
        return await self._run("reject", movement_id, self._reject)

    def clear_error(self) -> None:
        if self._error is not None:
            self._error = None
            self._notify()

    # ---------- command plumbing ----------

    async def _run(
        self,
        action: str,
        movement_id: str,
        operation: Callable[[str], Awaitable[str]],
    ) -> OperationResult:
        self._error = None
        with self._tracking():
            try:
                if not movement_id:
                    raise ValidationError("Movement ID is required")
                async with self._serialized(movement_id):
                    message = await operation(movement_id)
            except MovementError as exc:
                logger.warning(f"{action} {movement_id or '<missing>'} failed: {exc}")
                self._error = str(exc)
                return OperationResult(success=False, message=str(exc))

        logger.info(f"{action} {movement_id}: {message}")
        return OperationResult(success=True, message=message)

    @contextmanager
    def _tracking(self):
        self._in_flight += 1
        try:
            self._notify()
            yield
        finally:
            self._in_flight -= 1
            self._notify()

    @asynccontextmanager
    async def _serialized(self, movement_id: str):
        lock = self._locks.setdefault(movement_id, asyncio.Lock())
        self._lock_users[movement_id] = self._lock_users.get(movement_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[movement_id] -= 1
            if not self._lock_users[movement_id]:
                del self._lock_users[movement_id]
                del self._locks[movement_id]

    # ---------- transitions ----------

    async def _approve(self, movement_id: str) -> str:
        movement = self._require_pending(movement_id)
        prior_status = movement.status

        self._update(movement_id, status=APPROVED, approved_at=datetime.now())
        try:
            await self._backend.approve(movement_id)
        except Exception as exc:
            self._update(movement_id, status=prior_status or PENDING, approved_at=None)
            raise OperationFailure(str(exc) or "Failed to approve movement. Please try again.") from exc

        return "Movement approved successfully"

    async def _reject(self, movement_id: str) -> str:
        movement = self._require_pending(movement_id)
        position = self._index_of(movement_id)

        del self._movements[position]
        self._notify()
        try:
            await self._backend.reject(movement_id)
        except Exception as exc:
            self._restore(position, movement)
            raise OperationFailure(str(exc) or "Failed to reject movement. Please try again.") from exc

        return "Movement rejected and removed"

    def _require_pending(self, movement_id: str) -> Movement:
        movement = self.get(movement_id)
        if movement is None:
            raise ValidationError("Movement not found")
        if movement.status != PENDING:
            raise ConflictError(f"Movement is already {movement.status}")
        return movement

    # ---------- collection helpers ----------

    def _index_of(self, movement_id: str) -> Optional[int]:
        for index, movement in enumerate(self._movements):
            if movement.id == movement_id:
                return index
        return None

    def _update(self, movement_id: str, **changes) -> None:
        # Target the id, not a position: other commands may have reshaped the list
        index = self._index_of(movement_id)
        if index is None:
            return
        self._movements[index] = self._movements[index].model_copy(update=changes)
        self._notify()

    def _restore(self, position: int, movement: Movement) -> None:
        if self._index_of(movement.id) is not None:
            return
        self._movements.insert(min(position, len(self._movements)), movement)
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Store subscriber failed; continuing")
