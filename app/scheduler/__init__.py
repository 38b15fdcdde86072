from .scheduler import AnnouncementScheduler, SchedulePhase, ScheduleState
from .timers import APSchedulerTimers, TimerHandle, Timers
from .trigger import WEEK, WeeklyTrigger


__all__ = [
    "WEEK",
    "AnnouncementScheduler",
    "APSchedulerTimers",
    "SchedulePhase",
    "ScheduleState",
    "TimerHandle",
    "Timers",
    "WeeklyTrigger",
]
