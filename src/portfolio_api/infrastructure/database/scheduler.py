"""
Reconnect Scheduler
===================

Wrapper for APScheduler that runs the one-shot reconnect job.
"""

from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Optional

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from portfolio_api.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

RECONNECT_JOB_ID = "mongodb_reconnect"


class ReconnectScheduler:
    """
    Manages the lifecycle of the scheduler and the reconnect job.

    At most one reconnect job is pending at a time; scheduling again
    replaces it.
    """

    def __init__(self):
        self._scheduler: Optional[AsyncIOScheduler] = None
        self._running = False

    def start(self) -> None:
        """Start the scheduler. Must be called from a running event loop."""
        if self._running:
            return

        self._scheduler = AsyncIOScheduler(timezone=timezone.utc)
        self._scheduler.start()
        self._running = True
        logger.debug("Reconnect scheduler started")

    def schedule(self, job_func: Callable[[], Awaitable[None]], delay_seconds: float) -> None:
        """Run ``job_func`` once after ``delay_seconds``."""
        if self._scheduler is None:
            self.start()

        run_date = datetime.now(timezone.utc) + timedelta(seconds=delay_seconds)
        self._scheduler.add_job(
            job_func,
            "date",
            run_date=run_date,
            id=RECONNECT_JOB_ID,
            name="MongoDB reconnect",
            misfire_grace_time=None,
            replace_existing=True
        )
        logger.debug("Reconnect scheduled", extra={"delay_seconds": delay_seconds})

    def cancel(self) -> None:
        if self._scheduler is None:
            return
        try:
            self._scheduler.remove_job(RECONNECT_JOB_ID)
        except JobLookupError:
            pass

    def stop(self) -> None:
        """Stop the scheduler without waiting for a running attempt."""
        if not self._running:
            return

        if self._scheduler:
            self._scheduler.shutdown(wait=False)

        self._scheduler = None
        self._running = False
        logger.debug("Reconnect scheduler stopped")

    @property
    def is_running(self) -> bool:
        return self._running
