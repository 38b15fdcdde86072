from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.job import Job
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler


class TimerHandle(ABC):
    @abstractmethod
    def cancel(self) -> None:
        """Stop the timer. Cancelling an already finished or cancelled timer does nothing."""


class Timers(ABC):
    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        pass

    @abstractmethod
    def call_every(
        self, interval: float, callback: Callable[[], None], first_delay: float | None = None
    ) -> TimerHandle:
        """
        Run `callback` at `first_delay` (default: `interval`) from now and then
        every `interval` seconds after that instant, regardless of how long
        each run takes.
        """


class _JobHandle(TimerHandle):
    def __init__(self, job: Job):
        self._job = job

    def cancel(self) -> None:
        try:
            self._job.remove()
        except JobLookupError:
            # date jobs are dropped by the scheduler once they have run
            pass


class APSchedulerTimers(Timers):
    """Jobs on an APScheduler BackgroundScheduler; callbacks run on its worker threads."""

    def __init__(self, scheduler: BackgroundScheduler | None = None):
        self._scheduler = scheduler or BackgroundScheduler(
            executors={"default": ThreadPoolExecutor(max_workers=2)},
            timezone=timezone.utc,
        )

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _ensure_started(self) -> None:
        if not self._scheduler.running:
            self._scheduler.start()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        self._ensure_started()
        job = self._scheduler.add_job(
            callback,
            trigger="date",
            run_date=self._now() + timedelta(seconds=max(delay, 0.0)),
            misfire_grace_time=None,
        )
        return _JobHandle(job)

    def call_every(
        self, interval: float, callback: Callable[[], None], first_delay: float | None = None
    ) -> TimerHandle:
        self._ensure_started()
        first = interval if first_delay is None else max(first_delay, 0.0)
        job = self._scheduler.add_job(
            callback,
            trigger="interval",
            seconds=interval,
            start_date=self._now() + timedelta(seconds=first),
            coalesce=True,
            misfire_grace_time=None,
        )
        return _JobHandle(job)

    def shutdown(self) -> None:
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
