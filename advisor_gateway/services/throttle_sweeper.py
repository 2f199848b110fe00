"""Background task reclaiming expired throttle entries."""

from __future__ import annotations

import asyncio
import logging

from advisor_gateway.adapters.rate_limit.base import AbstractRequestThrottle

logger = logging.getLogger(__name__)


class ThrottleSweeper:
    """Calls ``throttle.sweep()`` on a fixed interval until stopped.

    Started and stopped by the application lifespan.
    """

    def __init__(self, throttle: AbstractRequestThrottle, interval_seconds: float) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")
        self._throttle = throttle
        self._interval = interval_seconds
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self._task is not None:
            logger.debug("throttle_sweeper.already_running")
            return

        self._stop_event.clear()
        self._task = asyncio.create_task(self._run())
        logger.info("throttle_sweeper.started", extra={"interval_s": self._interval})

    async def stop(self) -> None:
        if self._task is None:
            return

        self._stop_event.set()
        try:
            await asyncio.wait_for(self._task, timeout=5.0)
        except asyncio.TimeoutError:
            logger.warning("throttle_sweeper.stop_timeout")
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        finally:
            self._task = None
            logger.info("throttle_sweeper.stopped")

    def sweep_once(self) -> int:
        removed = self._throttle.sweep()
        if removed:
            logger.debug(
                "throttle_sweeper.swept",
                extra={"removed": removed, "remaining_entries": len(self._throttle)},
            )
        return removed

    async def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval)
            except asyncio.TimeoutError:
                # Interval elapsed without a stop request
                try:
                    self.sweep_once()
                except Exception:
                    logger.exception("throttle_sweeper.sweep_failed")
