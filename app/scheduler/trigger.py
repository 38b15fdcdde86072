from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo


WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

WEEK = timedelta(days=7)


class WeeklyTrigger:
    """A fixed weekday and time of day in one configured zone."""

    def __init__(self, weekday: int, hour: int, minute: int = 0, tz: str = "UTC"):
        if not 0 <= weekday <= 6:
            raise ValueError(f"weekday must be 0-6, got {weekday}")
        if not 0 <= hour <= 23 or not 0 <= minute <= 59:
            raise ValueError(f"invalid time of day {hour}:{minute}")

        self.weekday = weekday
        self.hour = hour
        self.minute = minute
        self.tz = ZoneInfo(tz)

    @classmethod
    def from_config(cls, day: str, hour: int, minute: int = 0, zone: str = "UTC") -> "WeeklyTrigger":
        try:
            weekday = WEEKDAYS.index(str(day).strip().lower())
        except ValueError:
            raise ValueError(f"unknown weekday {day!r}") from None
        return cls(weekday, int(hour), int(minute), zone)

    def next_occurrence(self, now: datetime) -> datetime:
        """
        The first trigger instant strictly after `now`. When `now` is exactly a
        trigger instant the result is one week later.
        """
        local = now.astimezone(self.tz)
        days_ahead = (self.weekday - local.weekday()) % 7
        candidate = (local + timedelta(days=days_ahead)).replace(
            hour=self.hour, minute=self.minute, second=0, microsecond=0
        )
        if candidate <= local:
            candidate += WEEK
        return candidate

    @staticmethod
    def seconds_until(fire_at: datetime, now: datetime) -> float:
        # aware datetimes sharing a tzinfo subtract as wall time, so compare in UTC
        return (fire_at.astimezone(timezone.utc) - now.astimezone(timezone.utc)).total_seconds()
