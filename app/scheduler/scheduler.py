import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from aws_lambda_powertools import Logger

from .timers import APSchedulerTimers, TimerHandle, Timers
from .trigger import WEEK, WeeklyTrigger


logger = Logger(child=True)


class SchedulePhase(str, Enum):
    STOPPED = "stopped"
    ARMED = "armed"
    RUNNING = "running"


@dataclass
class ScheduleState:
    phase: SchedulePhase = SchedulePhase.STOPPED
    next_fire_at: datetime | None = None
    timeout: TimerHandle | None = None
    interval: TimerHandle | None = None
    # bumped on every start/pause so callbacks from an earlier run can tell they are stale
    generation: int = 0


class AnnouncementScheduler:
    """
    Weekly announcements: a one-shot timer to the next trigger instant, then a
    fixed weekly interval.

    `start` while already armed or running cancels the existing timers first, so
    at most one timer pair is ever pending. `pause` keeps no remaining-time
    state; the next `start` computes the next trigger instant from scratch.

    The weekly interval is anchored at the first scheduled instant and armed
    before the first announcement runs, so later fires land on
    `fire_at + n * interval` however long an announcement takes.

    Callbacks hold the scheduler lock while `on_fire` runs, so once `pause`
    returns no announcement is in progress and none will start. The cost is
    that `start`/`pause` block behind an in-flight announcement, including
    its Slack posts (at most `notifier.max_retries + 1` attempts per channel,
    each bounded by the channel's request timeout).
    """

    def __init__(
        self,
        trigger: WeeklyTrigger,
        timers: Timers | None = None,
        clock: Callable[[], datetime] | None = None,
        interval: timedelta = WEEK,
    ):
        self._trigger = trigger
        self._timers = timers or APSchedulerTimers()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._interval = interval
        self._state = ScheduleState()
        self._lock = threading.RLock()

    @property
    def state(self) -> ScheduleState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state.phase is not SchedulePhase.STOPPED

    def start(self, on_fire: Callable[[], None]) -> timedelta:
        """Arm the schedule and return the time until the first announcement."""
        with self._lock:
            if self.is_active:
                logger.info("Scheduler already active, restarting", extra={"phase": self._state.phase.value})
                self._cancel_timers()

            now = self._clock()
            fire_at = self._trigger.next_occurrence(now)
            delay = self._trigger.seconds_until(fire_at, now)

            self._state.generation += 1
            generation = self._state.generation

            self._state.timeout = self._timers.call_later(
                delay, lambda: self._fire_first(generation, fire_at, on_fire)
            )
            self._state.phase = SchedulePhase.ARMED
            self._state.next_fire_at = fire_at

            logger.info("Scheduler armed", extra={"next_fire_at": fire_at.isoformat(), "delay_seconds": delay})
            return timedelta(seconds=delay)

    def pause(self) -> None:
        with self._lock:
            self._cancel_timers()
            self._state.generation += 1
            self._state.phase = SchedulePhase.STOPPED
            self._state.next_fire_at = None

            logger.info("Scheduler paused")

    def _cancel_timers(self) -> None:
        for handle in (self._state.timeout, self._state.interval):
            if handle is not None:
                handle.cancel()
        self._state.timeout = None
        self._state.interval = None

    def _fire_first(self, generation: int, fire_at: datetime, on_fire: Callable[[], None]) -> None:
        with self._lock:
            if generation != self._state.generation:
                return

            next_fire_at = fire_at + self._interval
            self._state.timeout = None
            self._state.phase = SchedulePhase.RUNNING
            self._state.interval = self._timers.call_every(
                self._interval.total_seconds(),
                lambda: self._fire(generation, on_fire),
                first_delay=self._trigger.seconds_until(next_fire_at, self._clock()),
            )
            self._state.next_fire_at = next_fire_at

            self._run(on_fire)

    def _fire(self, generation: int, on_fire: Callable[[], None]) -> None:
        with self._lock:
            if generation != self._state.generation:
                return

            self._state.next_fire_at += self._interval
            self._run(on_fire)

    @staticmethod
    def _run(on_fire: Callable[[], None]) -> None:
        try:
            on_fire()
        except Exception:
            logger.exception("Announcement failed")
