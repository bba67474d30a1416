from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional, Set

from app.core.config import settings
from app.schemas.network import NetworkStatsSnapshot, NetworkStatusSummary
from app.services.cortensor import cortensor_client

logger = logging.getLogger(__name__)


class NetworkStatsPoller:
    """Refreshes the network summary on a fixed interval.

    A tick never waits for or cancels an earlier refresh; whichever refresh
    resolves last sets the displayed summary.
    """

    def __init__(
        self,
        fetch: Callable[[], Awaitable[NetworkStatusSummary]],
        interval: float,
    ):
        self._fetch = fetch
        self.interval = interval
        self._stats: Optional[NetworkStatusSummary] = None
        self._refreshed_at: Optional[datetime] = None
        self._in_flight = 0
        self._loop_task: Optional[asyncio.Task] = None
        self._refreshes: Set[asyncio.Task] = set()

    @property
    def is_loading(self) -> bool:
        # Nothing to show yet counts as loading once polling has started
        return self._in_flight > 0 or (self.is_running and self._stats is None)

    @property
    def is_running(self) -> bool:
        return self._loop_task is not None and not self._loop_task.done()

    def snapshot(self) -> NetworkStatsSnapshot:
        return NetworkStatsSnapshot(
            is_loading=self.is_loading,
            stats=self._stats,
            refreshed_at=self._refreshed_at,
        )

    async def refresh(self) -> NetworkStatusSummary:
        self._in_flight += 1
        try:
            summary = await self._fetch()
        finally:
            self._in_flight -= 1
        self._stats = summary
        self._refreshed_at = datetime.now(timezone.utc)
        return summary

    def _spawn_refresh(self):
        task = asyncio.create_task(self.refresh())
        self._refreshes.add(task)
        task.add_done_callback(self._refresh_done)

    def _refresh_done(self, task: asyncio.Task):
        self._refreshes.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.warning(f"Network stats refresh failed: {task.exception()}")

    async def _run(self):
        while True:
            self._spawn_refresh()
            await asyncio.sleep(self.interval)

    def start(self):
        if self.is_running:
            return
        logger.info(f"Polling network stats every {self.interval}s")
        self._loop_task = asyncio.create_task(self._run())

    async def stop(self):
        tasks = list(self._refreshes)
        if self._loop_task is not None:
            tasks.append(self._loop_task)
            self._loop_task = None
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._refreshes.clear()


network_stats_poller = NetworkStatsPoller(
    cortensor_client.resolve_network_stats,
    interval=settings.STATUS_POLL_INTERVAL_SECONDS,
)
