from __future__ import annotations

import asyncio
from typing import Optional

from ...config import get_config
from ...logging import get_logger

logger = get_logger(__name__)


class SimulatedMovementBackend:
    """
    Stand-in for the remote movement service.

    Sleeps for a fixed delay to model network latency and always succeeds.
    Rejection is the heavier remove operation and waits longer.
    """

    def __init__(self, approve_delay_ms: Optional[int] = None, reject_delay_ms: Optional[int] = None) -> None:
        config = get_config()
        self.approve_delay_ms = config.approve_delay_ms if approve_delay_ms is None else approve_delay_ms
        self.reject_delay_ms = config.reject_delay_ms if reject_delay_ms is None else reject_delay_ms

    async def approve(self, movement_id: str) -> None:
        logger.debug(f"Simulating approve of {movement_id} ({self.approve_delay_ms} ms)")
        await asyncio.sleep(self.approve_delay_ms / 1000)

    async def reject(self, movement_id: str) -> None:
        logger.debug(f"Simulating reject of {movement_id} ({self.reject_delay_ms} ms)")
        await asyncio.sleep(self.reject_delay_ms / 1000)
